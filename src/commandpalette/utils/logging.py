from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, cast

import structlog
from loguru import logger as loguru_logger
from structlog.exceptions import DropEvent
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, WrappedLogger

from commandpalette.config.settings import log_dir


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message} | {extra}"
DEFAULT_LOG_FILENAME = "command-palette.log"


@dataclass(slots=True)
class LoggingOptions:
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    rotation: str = "10 MB"
    retention: str = "14 days"
    log_to_file: bool = True
    log_path: Optional[Path] = None


_configured_log_path: Optional[Path] = None


def configure_logging(options: LoggingOptions | None = None) -> Path | None:
    global _configured_log_path

    opts = options or LoggingOptions()

    console_level = "DEBUG" if opts.debug else opts.level

    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level=console_level,
        colorize=True,
        backtrace=opts.debug,
        diagnose=opts.debug,
        format=LOG_FORMAT,
    )

    log_path: Path | None = None
    if opts.log_to_file:
        log_path = opts.log_path or (log_dir() / DEFAULT_LOG_FILENAME)
        loguru_logger.add(
            log_path,
            level="DEBUG",
            rotation=opts.rotation,
            retention=opts.retention,
            encoding="utf-8",
            format=LOG_FORMAT,
        )

    numeric_level = logging.DEBUG if opts.debug else getattr(
        logging, opts.level.upper(), logging.INFO
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _log_to_loguru,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )

    _configured_log_path = log_path
    return log_path


def _log_to_loguru(
    _: WrappedLogger,
    __: str,
    event_dict: EventDict,
) -> EventDict:
    level = str(event_dict.pop("level", "INFO")).upper()
    event = event_dict.pop("event", "")
    timestamp = event_dict.pop("timestamp", None)
    exception = event_dict.pop("exception", None)
    event_dict.pop("stack", None)
    bind_logger = loguru_logger.bind(**event_dict)
    if timestamp:
        bind_logger = bind_logger.bind(timestamp=timestamp)
    if exception:
        event = f"{event}\n{exception}"
    bind_logger.opt(depth=6).log(level, event)
    raise DropEvent


def get_logger(*initial_values: object, **initial_kw: object) -> BoundLogger:
    return cast(BoundLogger, structlog.get_logger(*initial_values, **initial_kw))


def log_file_path() -> Path | None:
    return _configured_log_path


__all__ = [
    "LoggingOptions",
    "configure_logging",
    "get_logger",
    "log_file_path",
]
