from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, Sequence, Union

from commandpalette.query import join_query, normalize_category, split_query
from commandpalette.utils import UnknownResultTypeError, get_logger


logger = get_logger(__name__)

CommandHandler = Callable[[Any], object]


class SearchResultType(StrEnum):
    HEADER = "header"
    COMMAND = "command"


class ActivationTarget(StrEnum):
    ANY = "any"
    HEADER = "header"
    COMMAND = "command"


@dataclass(frozen=True, slots=True)
class HeaderResult:
    """A section header introducing the commands of one category.

    ``text`` may contain highlight markers. ``category`` is the plain
    normalised category value, suitable for refining the query.
    """

    text: str
    category: str
    type: SearchResultType = field(default=SearchResultType.HEADER, init=False)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """A selectable command. ``text`` may contain highlight markers."""

    text: str
    handler: CommandHandler
    args: Any = None
    icon: str = ""
    caption: str = ""
    shortcut: str = ""
    class_name: str = ""
    type: SearchResultType = field(default=SearchResultType.COMMAND, init=False)

    def execute(self) -> None:
        self.handler(self.args)


SearchResult = Union[HeaderResult, CommandResult]


def refine_query(query: str, header: HeaderResult) -> str:
    """Toggle the header's category in ``query``, keeping the free text.

    When the query is already scoped to the header's category the scope is
    dropped; otherwise the query is rescoped to that category.
    """

    current = split_query(query)
    desired = header.category.strip()
    if normalize_category(current.category) == normalize_category(desired):
        desired = ""
    return join_query(desired, current.text)


def activate(result: SearchResult, query: str) -> str:
    """Trigger ``result`` and return the query text the palette should show.

    Headers refine the query by category. Commands run their handler with
    their arguments and leave the query untouched.
    """

    match getattr(result, "type", None):
        case SearchResultType.HEADER:
            refined = refine_query(query, result)  # type: ignore[arg-type]
            logger.debug("Header activated", category=result.category, query=refined)
            return refined
        case SearchResultType.COMMAND:
            logger.debug("Command activated", text=result.text)
            result.execute()  # type: ignore[union-attr]
            return query
        case _:
            raise UnknownResultTypeError(result)


def find_result_index(
    results: Sequence[SearchResult],
    target: ActivationTarget = ActivationTarget.ANY,
    start: int = -1,
    *,
    reverse: bool = False,
    wrap: bool = False,
) -> int:
    """Return the index of the next result matching ``target`` after ``start``.

    Searching moves forward from ``start + 1`` or, with ``reverse``, backward
    from ``start - 1`` (``start=-1`` with ``reverse`` begins at the last
    result). With ``wrap`` the search continues around the ends of the
    sequence until ``start`` is reached again. Returns ``-1`` when nothing
    matches.
    """

    count = len(results)
    if count == 0:
        return -1

    step = -1 if reverse else 1
    if reverse and start < 0:
        first = count - 1
    else:
        first = start + step

    span = count if wrap else (first + 1 if reverse else count - first)
    for offset in range(max(span, 0)):
        index = first + step * offset
        if wrap:
            index %= count
        elif index < 0 or index >= count:
            break
        if _matches_target(results[index], target):
            return index
    return -1


def _matches_target(result: SearchResult, target: ActivationTarget) -> bool:
    if target is ActivationTarget.ANY:
        return True
    if target is ActivationTarget.HEADER:
        return result.type is SearchResultType.HEADER
    return result.type is SearchResultType.COMMAND


__all__ = [
    "ActivationTarget",
    "CommandHandler",
    "CommandResult",
    "HeaderResult",
    "SearchResult",
    "SearchResultType",
    "activate",
    "find_result_index",
    "refine_query",
]
