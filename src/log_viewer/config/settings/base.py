"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True)
class Settings:
    """Frozen settings dataclass, validated on construction.

    ``_prefix`` namespaces environment variables: field ``port`` of a class
    with prefix ``LOG_VIEWER`` is read from ``LOG_VIEWER_PORT``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for unusable values."""


__all__ = ["Settings"]
