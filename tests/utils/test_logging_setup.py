from __future__ import annotations

import os
import subprocess
import sys
import textwrap
from pathlib import Path

from loguru import logger as loguru_logger

import commandpalette
from commandpalette.utils.logging import (
    LoggingOptions,
    configure_logging,
    get_logger,
    log_file_path,
)


def test_configure_logging_writes_to_file(tmp_path) -> None:
    log_path = tmp_path / "palette.log"

    returned = configure_logging(LoggingOptions(level="DEBUG", log_path=log_path))
    try:
        get_logger("tests").info("Palette ready", items=3)
        loguru_logger.complete()

        assert returned == log_path
        assert log_file_path() == log_path
        content = log_path.read_text(encoding="utf-8")
        assert "Palette ready" in content
        assert "'items': 3" in content
    finally:
        configure_logging(LoggingOptions(level="WARNING", log_to_file=False))


def test_console_only_logging_has_no_file() -> None:
    assert configure_logging(LoggingOptions(log_to_file=False)) is None
    assert log_file_path() is None
    configure_logging(LoggingOptions(level="WARNING", log_to_file=False))


def test_level_filtering_drops_debug(tmp_path) -> None:
    log_path = tmp_path / "quiet.log"

    configure_logging(LoggingOptions(level="INFO", log_path=log_path))
    try:
        get_logger("tests").debug("hidden detail")
        get_logger("tests").warning("visible warning")
        loguru_logger.complete()

        content = log_path.read_text(encoding="utf-8")
        assert "visible warning" in content
        assert "hidden detail" not in content
    finally:
        configure_logging(LoggingOptions(level="WARNING", log_to_file=False))


def test_import_keeps_host_loguru_sinks() -> None:
    # Runs in a fresh interpreter so the package is imported after the sink exists.
    script = textwrap.dedent(
        """
        from loguru import logger

        received = []
        logger.add(received.append, level="INFO")

        from commandpalette import ItemRegistry, Query, search

        registry = ItemRegistry()
        registry.add("Open file", category="File", handler=lambda args: None)
        search(registry, Query(text="op"))

        logger.info("host message")
        print(sum("host message" in str(message) for message in received))
        """
    )
    env = dict(os.environ)
    env["PYTHONPATH"] = str(Path(commandpalette.__file__).resolve().parents[1])

    completed = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    assert completed.stdout.strip().splitlines()[-1] == "1"
