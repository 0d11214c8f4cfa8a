"""Config – LogViewerSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar
from urllib.parse import urlparse

from log_viewer.config.settings import (
    DotenvSettingsLoader,
    JsonFileSettingsLoader,
    Settings,
    SettingsFactory,
)
from log_viewer.config.validation import InvalidSettingValueError

CONFIG_FILE = "log-viewer.json"
ENV_FILE = ".env"

_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})
# Level names used by existing log-viewer.json files
_ALIASES = {"WARN": "WARNING", "TRACE": "DEBUG"}


def _level_name(level: str) -> str:
    name = level.strip().upper()
    return _ALIASES.get(name, name)


@dataclasses.dataclass(frozen=True)
class LogViewerSettings(Settings):
    """Process configuration, built once and passed to every component."""

    _prefix: ClassVar[str] = "LOG_VIEWER"

    elastic_url: str = "http://localhost:9200"
    index_pattern: str = "filebeat-*"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3030
    json_logs: bool = True

    def _validate(self) -> None:
        if _level_name(self.log_level) not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVELS.union(_ALIASES))}"
            )
        if urlparse(self.elastic_url).scheme not in ("http", "https"):
            raise InvalidSettingValueError("elastic_url", self.elastic_url, "expected an http(s) URL")
        if not self.index_pattern.strip():
            raise InvalidSettingValueError("index_pattern", self.index_pattern, "must not be empty")
        if not isinstance(self.port, int) or not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "expected an integer in 1..65535")

    @property
    def log_level_no(self) -> int:
        return logging.getLevelName(_level_name(self.log_level))

    @classmethod
    def load(
        cls,
        config_file: str = CONFIG_FILE,
        env_file: str = ENV_FILE,
        **overrides: object,
    ) -> "LogViewerSettings":
        """Read ``log-viewer.json``, then ``.env`` / environment (later wins)."""
        return SettingsFactory.create(
            cls,
            loaders=[JsonFileSettingsLoader(config_file), DotenvSettingsLoader(env_file)],
            overrides=dict(overrides) or None,
        )


__all__ = ["CONFIG_FILE", "ENV_FILE", "LogViewerSettings"]
