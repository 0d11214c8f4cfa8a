"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from log_viewer.config.settings.base import Settings
from log_viewer.config.settings.loaders import SettingsLoader
from log_viewer.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Build one settings object from layered sources.

    Each loader contributes only the fields its source sets; later loaders
    override earlier ones and *overrides* override everything. Defaults on the
    dataclass fill whatever no source mentions. A loader that fails aborts
    construction with its own error.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default has no value after merging.
        InvalidSettingValueError
            A loader or ``_validate`` rejected a value.
        ConfigError
            A source could not be read, or the merged values do not fit the
            dataclass (for example an unknown override name).
        """
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            merged.update(loader.load_values(settings_cls))
        merged.update(overrides or {})

        missing = [
            field.name
            for field in dataclasses.fields(settings_cls)  # type: ignore[arg-type]
            if field.name not in merged
            and field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
        ]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
