"""Config validation errors.

Every error carries the offending setting in ``detail`` so it can be
rendered through a message bundle (``errors.invalid_setting_value``).
"""
from catalog_query.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or built."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is required but no source provides it",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. ``LISTING_TOP_N=0``."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": str(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
