from __future__ import annotations

import locale
from dataclasses import dataclass
from typing import Dict, List, Protocol, runtime_checkable

from commandpalette.config import Settings
from commandpalette.events import EventHook
from commandpalette.matching import MatchResult, highlight, sum_of_squares
from commandpalette.query import Query, coerce_query, fold_case
from commandpalette.registry import CommandItem, ItemRegistry
from commandpalette.results import CommandResult, HeaderResult, SearchResult
from commandpalette.utils import get_logger


logger = get_logger(__name__)

_TRIVIAL_MATCH = MatchResult(score=0, indices=())


@runtime_checkable
class PaletteModel(Protocol):
    """Anything a palette can query.

    Implementations emit ``changed`` whenever previously computed results may
    no longer be valid.
    """

    changed: EventHook[None]

    def search(self, query: Query | str) -> List[SearchResult]: ...


@dataclass(slots=True)
class _Match:
    item: CommandItem
    score: int
    category_indices: tuple[int, ...]
    text_indices: tuple[int, ...]


def _collation_key(value: str) -> tuple[str, str, str]:
    # strxfrm rejects embedded NULs; the raw value breaks remaining ties.
    cleaned = value.replace("\x00", "")
    return (locale.strxfrm(cleaned.casefold()), locale.strxfrm(cleaned), value)


class StandardPaletteModel:
    """Palette model backed by an in-memory :class:`ItemRegistry`.

    Suitable when the items are known up front and their number is modest.
    Every search rescans the registry; nothing is cached between calls.
    """

    def __init__(
        self,
        registry: ItemRegistry | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        self._registry = registry if registry is not None else ItemRegistry()
        self._settings = settings or Settings()
        self.changed: EventHook[None] = EventHook()
        self._unsubscribe = self._registry.on_changed(self.changed.emit)

    @property
    def registry(self) -> ItemRegistry:
        return self._registry

    @property
    def settings(self) -> Settings:
        return self._settings

    def close(self) -> None:
        """Stop forwarding registry changes to this model's subscribers."""
        self._unsubscribe()

    def search(self, query: Query | str) -> List[SearchResult]:
        normalized = coerce_query(query).normalized()
        items = self._registry.items()
        if not items:
            return []

        categories = self._match_categories(items, normalized.category)
        matches = self._match_items(items, categories, normalized.text)
        matches.sort(
            key=lambda match: (
                match.score,
                _collation_key(match.item.category),
                _collation_key(match.item.text),
            )
        )
        results = self._render(matches)
        logger.debug(
            "Palette search completed",
            category=normalized.category,
            text=normalized.text,
            categories=len(categories),
            matches=len(matches),
        )
        return results

    # ----------------------------------------------------------------- Phases

    def _match_categories(
        self, items: List[CommandItem], query_category: str
    ) -> Dict[str, MatchResult]:
        matched: Dict[str, MatchResult] = {}
        seen: set[str] = set()
        for item in items:
            category = item.category
            if category in seen:
                continue
            seen.add(category)
            if not query_category:
                matched[category] = _TRIVIAL_MATCH
                continue
            result = sum_of_squares(category, query_category)
            if result is not None:
                matched[category] = result
        return matched

    def _match_items(
        self,
        items: List[CommandItem],
        categories: Dict[str, MatchResult],
        query_text: str,
    ) -> List[_Match]:
        matches: List[_Match] = []
        for item in items:
            category_match = categories.get(item.category)
            if category_match is None:
                continue
            if not query_text:
                text_match = _TRIVIAL_MATCH
            else:
                text_match = sum_of_squares(fold_case(item.text), query_text)
                if text_match is None:
                    continue
            matches.append(
                _Match(
                    item=item,
                    score=category_match.score + text_match.score,
                    category_indices=category_match.indices,
                    text_indices=text_match.indices,
                )
            )
        return matches

    def _render(self, matches: List[_Match]) -> List[SearchResult]:
        groups: Dict[str, List[_Match]] = {}
        for match in matches:
            groups.setdefault(match.item.category, []).append(match)

        results: List[SearchResult] = []
        for category, members in groups.items():
            results.append(
                HeaderResult(
                    text=self._highlight(category, members[0].category_indices),
                    category=category,
                )
            )
            for match in members:
                item = match.item
                results.append(
                    CommandResult(
                        text=self._highlight(item.text, match.text_indices),
                        handler=item.handler,
                        args=item.args,
                        icon=item.icon,
                        caption=item.caption,
                        shortcut=item.shortcut,
                        class_name=item.class_name,
                    )
                )
        return results

    def _highlight(self, text: str, indices: tuple[int, ...]) -> str:
        return highlight(
            text,
            indices,
            prefix=self._settings.highlight_prefix,
            suffix=self._settings.highlight_suffix,
        )


def search(
    registry: ItemRegistry,
    query: Query | str,
    *,
    settings: Settings | None = None,
) -> List[SearchResult]:
    """Run a one-off search over ``registry`` with the standard model."""

    model = StandardPaletteModel(registry, settings=settings)
    try:
        return model.search(query)
    finally:
        model.close()


__all__ = ["PaletteModel", "StandardPaletteModel", "search"]
