from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "CommandPalette"
ENV_PREFIX = "COMMAND_PALETTE_"
ENV_FILE_NAME = "settings.env"

DEFAULT_HIGHLIGHT_PREFIX = "<mark>"
DEFAULT_HIGHLIGHT_SUFFIX = "</mark>"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    path = cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return _config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Presentation defaults shared by palette models.

    The highlight markers wrap each contiguous run of matched characters in
    rendered result text. They are inserted verbatim, so the embedding layer
    decides whether they are HTML tags, ANSI sequences or plain brackets.
    """

    highlight_prefix: str = DEFAULT_HIGHLIGHT_PREFIX
    highlight_suffix: str = DEFAULT_HIGHLIGHT_SUFFIX
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def highlights_enabled(self) -> bool:
        """True when at least one marker would be emitted around matches."""
        return bool(self.highlight_prefix or self.highlight_suffix)


class SettingsManager:
    """Load and persist palette settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to persisted file."""
        load_dotenv(self._env_file, override=False)

        settings = Settings()

        prefix = self._get_env("HIGHLIGHT_PREFIX")
        suffix = self._get_env("HIGHLIGHT_SUFFIX")
        if prefix is not None:
            settings.highlight_prefix = prefix
        if suffix is not None:
            settings.highlight_suffix = suffix

        level = self._get_env("LOG_LEVEL")
        if level and level.upper() in _LOG_LEVELS:
            settings.log_level = level.upper()

        return settings

    def save(self, settings: Settings) -> None:
        """Persist configuration fields to the managed env file."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}HIGHLIGHT_PREFIX={_quote(settings.highlight_prefix)}",
            f"{ENV_PREFIX}HIGHLIGHT_SUFFIX={_quote(settings.highlight_suffix)}",
            f"{ENV_PREFIX}LOG_LEVEL={settings.log_level}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}")


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


__all__ = [
    "DEFAULT_HIGHLIGHT_PREFIX",
    "DEFAULT_HIGHLIGHT_SUFFIX",
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
