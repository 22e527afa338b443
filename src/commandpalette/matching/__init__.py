"""Fuzzy text scoring and match highlighting."""

from .stringsearch import (
    MatchResult,
    highlight,
    highlight_runs,
    match_subsequence,
    sum_of_squares,
)

__all__ = [
    "MatchResult",
    "highlight",
    "highlight_runs",
    "match_subsequence",
    "sum_of_squares",
]
