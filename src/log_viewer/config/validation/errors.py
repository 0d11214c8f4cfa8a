"""Config validation errors."""
from log_viewer.kernel.errors import BaseError


class ConfigError(BaseError):
    """Configuration could not be read or does not describe a usable service."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No source supplied a value for a field without a default."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable.

    ``source`` names where the value came from (an environment variable or a
    settings file) when that is known.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, source: str | None = None) -> None:
        origin = f" (from {source})" if source else ""
        super().__init__(
            f"Setting '{setting_name}'{origin} has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "source": source, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.source = source


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
