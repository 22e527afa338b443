"""Shared utility helpers for the command palette."""

from .errors import (
    ErrorDescriptor,
    ErrorSeverity,
    HighlightIndexError,
    InvariantViolation,
    PaletteError,
    UnknownResultTypeError,
    describe_exception,
)
from .logging import LoggingOptions, configure_logging, get_logger, log_file_path

__all__ = [
    "LoggingOptions",
    "configure_logging",
    "get_logger",
    "log_file_path",
    "ErrorDescriptor",
    "ErrorSeverity",
    "PaletteError",
    "InvariantViolation",
    "HighlightIndexError",
    "UnknownResultTypeError",
    "describe_exception",
]
