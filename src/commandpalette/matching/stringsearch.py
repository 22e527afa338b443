from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from commandpalette.config.settings import (
    DEFAULT_HIGHLIGHT_PREFIX,
    DEFAULT_HIGHLIGHT_SUFFIX,
)
from commandpalette.utils.errors import HighlightIndexError


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a successful subsequence match.

    ``score`` is lower-is-better; zero is the best possible score.
    ``indices`` are the positions in the source text that matched the query,
    strictly increasing.
    """

    score: int
    indices: tuple[int, ...] = ()


def sum_of_squares(source_text: str, query_text: str) -> MatchResult | None:
    """Score ``query_text`` as an in-order subsequence of ``source_text``.

    Every character of the query must appear in the source, in order. Each
    query character is matched to its leftmost occurrence after the previous
    match, and the square of the matched index is added to the score, so
    early and consecutive matches are preferred.

    Matching is strict character equality: case and whitespace sensitive.
    Callers normalise both strings beforehand when that is not wanted.

    Returns ``None`` when the query is not a subsequence of the source. The
    scan only moves forward, so this runs in ``O(len(source_text))``.
    """

    indices: list[int] = []
    score = 0
    position = 0
    for char in query_text:
        found = source_text.find(char, position)
        if found == -1:
            return None
        indices.append(found)
        score += found * found
        position = found + 1
    return MatchResult(score=score, indices=tuple(indices))


def highlight(
    source_text: str,
    indices: Sequence[int],
    *,
    prefix: str = DEFAULT_HIGHLIGHT_PREFIX,
    suffix: str = DEFAULT_HIGHLIGHT_SUFFIX,
) -> str:
    """Wrap each contiguous run of matched characters in ``prefix``/``suffix``.

    The text is not escaped. Indices must be strictly increasing and within
    ``source_text``; anything else raises :class:`HighlightIndexError`.
    """

    if not indices:
        return source_text

    pieces: list[str] = []
    last = 0
    run_start: int | None = None
    previous = -1
    for index in indices:
        if index <= previous or index >= len(source_text):
            raise HighlightIndexError(source_text, index, previous)
        if run_start is None:
            run_start = index
        elif index != previous + 1:
            pieces.append(source_text[last:run_start])
            pieces.append(f"{prefix}{source_text[run_start:previous + 1]}{suffix}")
            last = previous + 1
            run_start = index
        previous = index

    pieces.append(source_text[last:run_start])
    pieces.append(f"{prefix}{source_text[run_start:previous + 1]}{suffix}")
    pieces.append(source_text[previous + 1:])
    return "".join(pieces)


match_subsequence = sum_of_squares
highlight_runs = highlight


__all__ = [
    "MatchResult",
    "highlight",
    "highlight_runs",
    "match_subsequence",
    "sum_of_squares",
]
