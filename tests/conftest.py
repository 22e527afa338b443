from __future__ import annotations

from typing import Any, Callable

import pytest

from commandpalette.config import Settings
from commandpalette.registry import ItemRegistry
from commandpalette.utils import LoggingOptions, configure_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> None:
    configure_logging(LoggingOptions(level="WARNING", log_to_file=False))


class HandlerRecorder:
    """Collect the arguments each command handler was invoked with."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, args: Any) -> None:
        self.calls.append(args)


@pytest.fixture
def recorder() -> HandlerRecorder:
    return HandlerRecorder()


@pytest.fixture
def registry() -> ItemRegistry:
    return ItemRegistry()


@pytest.fixture
def make_registry(recorder: HandlerRecorder) -> Callable[..., ItemRegistry]:
    """Build a registry from ``(text, category)`` pairs sharing one handler."""

    def _make(*entries: tuple[str, str]) -> ItemRegistry:
        registry = ItemRegistry()
        registry.add_many(
            {"text": text, "category": category, "handler": recorder, "args": text}
            for text, category in entries
        )
        return registry

    return _make


@pytest.fixture
def plain_settings() -> Settings:
    """Settings with bracket markers so expected strings stay readable."""

    return Settings(highlight_prefix="[", highlight_suffix="]")
