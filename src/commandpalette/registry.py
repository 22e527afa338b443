from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Mapping

from commandpalette.events import EventHook
from commandpalette.query import normalize_category
from commandpalette.results import CommandHandler
from commandpalette.utils import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class CommandItem:
    """A registered palette command.

    ``category`` is normalised once, on construction, so grouping and
    comparisons downstream are case and whitespace insensitive. Items compare
    by identity.
    """

    text: str
    handler: CommandHandler
    category: str = ""
    args: Any = None
    icon: str = ""
    caption: str = ""
    shortcut: str = ""
    class_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", normalize_category(self.category))

    def execute(self) -> None:
        self.handler(self.args)


class ItemRegistry:
    """Ordered collection of palette commands with a change broadcast."""

    def __init__(self) -> None:
        self._items: List[CommandItem] = []
        self.changed: EventHook[None] = EventHook()

    def add(
        self,
        text: str,
        *,
        handler: CommandHandler,
        category: str = "",
        args: Any = None,
        icon: str = "",
        caption: str = "",
        shortcut: str = "",
        class_name: str = "",
    ) -> CommandItem:
        item = CommandItem(
            text=text,
            handler=handler,
            category=category,
            args=args,
            icon=icon,
            caption=caption,
            shortcut=shortcut,
            class_name=class_name,
        )
        self._items.append(item)
        logger.debug("Palette item added", text=text, category=item.category)
        self.changed.emit(None)
        return item

    def add_many(self, options: Iterable[Mapping[str, Any]]) -> List[CommandItem]:
        items = [CommandItem(**dict(opts)) for opts in options]
        if not items:
            return items
        self._items.extend(items)
        logger.debug("Palette items added", count=len(items))
        self.changed.emit(None)
        return items

    def remove(self, item: CommandItem) -> None:
        for index, existing in enumerate(self._items):
            if existing is item:
                del self._items[index]
                logger.debug("Palette item removed", text=item.text)
                self.changed.emit(None)
                return

    def remove_many(self, items: Iterable[CommandItem]) -> None:
        doomed = {id(item) for item in items}
        rest = [item for item in self._items if id(item) not in doomed]
        if len(rest) == len(self._items):
            return
        removed = len(self._items) - len(rest)
        self._items = rest
        logger.debug("Palette items removed", count=removed)
        self.changed.emit(None)

    def clear(self) -> None:
        if not self._items:
            return
        count = len(self._items)
        self._items.clear()
        logger.debug("Palette items cleared", count=count)
        self.changed.emit(None)

    def items(self) -> List[CommandItem]:
        return list(self._items)

    def on_changed(self, callback: Callable[[None], None]) -> Callable[[], None]:
        return self.changed.subscribe(callback)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CommandItem]:
        return iter(self.items())

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)


__all__ = ["CommandItem", "ItemRegistry"]
