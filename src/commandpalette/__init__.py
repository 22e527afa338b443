"""Fuzzy command palette search core."""

from .events import EventHook
from .matching import MatchResult, highlight, highlight_runs, match_subsequence, sum_of_squares
from .model import PaletteModel, StandardPaletteModel, search
from .query import Query, fold_case, join_query, normalize_category, normalize_text, split_query
from .registry import CommandItem, ItemRegistry
from .results import (
    ActivationTarget,
    CommandResult,
    HeaderResult,
    SearchResult,
    SearchResultType,
    activate,
    find_result_index,
    refine_query,
)

__all__ = [
    "ActivationTarget",
    "CommandItem",
    "CommandResult",
    "EventHook",
    "HeaderResult",
    "ItemRegistry",
    "MatchResult",
    "PaletteModel",
    "Query",
    "SearchResult",
    "SearchResultType",
    "StandardPaletteModel",
    "activate",
    "find_result_index",
    "fold_case",
    "highlight",
    "highlight_runs",
    "join_query",
    "match_subsequence",
    "normalize_category",
    "normalize_text",
    "refine_query",
    "search",
    "split_query",
    "sum_of_squares",
]
