from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"\s+")
_BARE_CATEGORY: Final[re.Pattern[str]] = re.compile(r"^(\w[\w ]*?)\s*:(.*)$", re.DOTALL)

DELIMITER: Final[str] = ":"


def normalize_category(value: str) -> str:
    """Trim, collapse internal whitespace to single spaces and lower-case."""

    return _WHITESPACE_RUN.sub(" ", value.strip()).lower()


def fold_case(value: str) -> str:
    """Lower-case one character at a time, keeping the string length.

    Characters whose lower-case form is longer (such as ``İ``) are kept
    unchanged, so match indices still point into the displayed text. Query and
    item text both go through this fold.
    """

    return "".join(
        lowered if len(lowered) == 1 else char
        for char, lowered in ((char, char.lower()) for char in value)
    )


def normalize_text(value: str) -> str:
    """Drop all whitespace and fold case, ready for subsequence matching."""

    return fold_case(_WHITESPACE_RUN.sub("", value))


@dataclass(frozen=True, slots=True)
class Query:
    """A palette query split into its category filter and free text."""

    category: str = ""
    text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.category and not self.text

    def normalized(self) -> "Query":
        return Query(
            category=normalize_category(self.category),
            text=normalize_text(self.text),
        )

    def __str__(self) -> str:
        return join_query(self.category, self.text)


def split_query(query: str) -> Query:
    """Split a raw query of the form ``(:<category>:)?<text>``.

    Both parts are stripped. A string not starting with the delimiter is
    treated as free text, except for the shorthand ``category: text`` where
    the leading segment is made of word characters and spaces.
    """

    query = query.strip()
    if not query.startswith(DELIMITER):
        bare = _BARE_CATEGORY.match(query)
        if bare is None:
            return Query(category="", text=query)
        return Query(category=bare.group(1).strip(), text=bare.group(2).strip())

    end = query.find(DELIMITER, 1)
    if end == -1:
        return Query(category=query[1:].strip(), text="")
    return Query(category=query[1:end].strip(), text=query[end + 1:].strip())


def join_query(category: str, text: str) -> str:
    """Join category and text into the canonical ``:<category>: <text>`` form."""

    category = category.strip()
    text = text.strip()
    if category and text:
        return f"{DELIMITER}{category}{DELIMITER} {text}"
    if category:
        return f"{DELIMITER}{category}{DELIMITER} "
    return text


def coerce_query(query: Query | str) -> Query:
    if isinstance(query, Query):
        return query
    return split_query(query)


__all__ = [
    "DELIMITER",
    "Query",
    "coerce_query",
    "fold_case",
    "join_query",
    "normalize_category",
    "normalize_text",
    "split_query",
]
