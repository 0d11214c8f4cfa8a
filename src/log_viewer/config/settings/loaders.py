"""Config settings – EnvSettingsLoader, DotenvSettingsLoader, JsonFileSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import json
import os
import re
from pathlib import Path
from typing import Any, TypeVar

from dotenv import load_dotenv

from log_viewer.config.settings.base import Settings
from log_viewer.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source.

    :meth:`load_values` returns only the fields the source sets explicitly,
    so several loaders can be layered by :class:`SettingsFactory`.
    """

    @abc.abstractmethod
    def load_values(self, settings_class: type[T]) -> dict[str, Any]: ...

    def load(self, settings_class: type[T]) -> T:
        values = self.load_values(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in values and _required(field):
                raise MissingRequiredSettingError(field.name)
        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables (``{PREFIX}_{FIELD}``)."""

    def load_values(self, settings_class: type[T]) -> dict[str, Any]:
        prefix = getattr(settings_class, "_prefix", "").upper()
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            values[field.name] = self._coerce(field.name, env_key, raw, field.type)

        return values

    def _coerce(self, name: str, env_key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        try:
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, value, str(exc), source=env_key) from exc
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load_values(self, settings_class: type[T]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().load_values(settings_class)


class JsonFileSettingsLoader(SettingsLoader):
    """Load settings from a JSON file with camelCase (or snake_case) keys.

    A missing file contributes nothing; unknown keys are rejected.
    """

    def __init__(self, path: str | Path = "log-viewer.json") -> None:
        self._path = Path(path)

    def load_values(self, settings_class: type[T]) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Cannot read settings file '{self._path}': {exc}", cause=exc) from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Settings file '{self._path}' must contain a JSON object")

        names = {field.name for field in dataclasses.fields(settings_class)}  # type: ignore[arg-type]
        values: dict[str, Any] = {}
        for key, value in raw.items():
            name = _CAMEL_BOUNDARY.sub("_", key).lower()
            if name not in names:
                raise InvalidSettingValueError(key, value, "unknown setting", source=str(self._path))
            values[name] = value
        return values


__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "JsonFileSettingsLoader",
    "SettingsLoader",
]
