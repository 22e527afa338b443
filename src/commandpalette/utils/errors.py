from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class PaletteError(Exception):
    """Base class for every error raised by the palette core."""


class InvariantViolation(PaletteError):
    """A programmer error that must surface immediately instead of misrendering."""


class HighlightIndexError(InvariantViolation):
    def __init__(self, source_text: str, index: int, previous: int) -> None:
        self.source_text = source_text
        self.index = index
        self.previous = previous
        super().__init__(
            f"Highlight index {index} is invalid for {source_text!r} "
            f"(length {len(source_text)}, previous index {previous})"
        )


class UnknownResultTypeError(InvariantViolation):
    def __init__(self, result: object) -> None:
        self.result = result
        tag = getattr(result, "type", None)
        super().__init__(f"Unrecognised search result type {tag!r} for {result!r}")


@dataclass(slots=True)
class ErrorDescriptor:
    headline: str
    detail: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    suggestion: str | None = None


def describe_exception(error: Exception) -> ErrorDescriptor:
    descriptor = ErrorDescriptor(
        headline="Command failed.",
        detail=f"{type(error).__name__}: {error}",
        severity=ErrorSeverity.ERROR,
    )

    root = _unwrap_error(error)

    if isinstance(root, HighlightIndexError):
        descriptor.headline = "Search result highlighting is inconsistent."
        descriptor.detail = str(root)
        descriptor.suggestion = "Report this issue; match indices must come from the matcher."
        return descriptor

    if isinstance(root, UnknownResultTypeError):
        descriptor.headline = "The palette produced a result it cannot display."
        descriptor.detail = str(root)
        descriptor.suggestion = "Check that the palette model only emits header or command results."
        return descriptor

    if isinstance(root, InvariantViolation):
        descriptor.headline = "The command palette reached an invalid state."
        descriptor.detail = str(root)
        return descriptor

    if root is not error:
        descriptor.detail = f"{type(root).__name__}: {root}"
    descriptor.suggestion = "The command handler raised an error; see the log for details."
    return descriptor


def _unwrap_error(error: Exception) -> Exception:
    current = error
    visited: set[int] = set()
    while True:
        visited.add(id(current))
        inner = None
        if getattr(current, "__cause__", None) is not None:
            inner = current.__cause__  # type: ignore[assignment]
        elif getattr(current, "__context__", None) is not None:
            inner = current.__context__  # type: ignore[assignment]
        if inner is None or id(inner) in visited:
            return current
        current = inner


__all__ = [
    "ErrorDescriptor",
    "ErrorSeverity",
    "HighlightIndexError",
    "InvariantViolation",
    "PaletteError",
    "UnknownResultTypeError",
    "describe_exception",
]
