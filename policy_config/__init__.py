"""Policy configuration: settings schema and loader."""

from .loader import (
    ConfigValidationError,
    load_and_validate_settings,
    load_config_file,
    validate_settings,
)
from .schema import DEFAULT_SETTINGS, DEFAULT_SPECIAL_CHARACTERS, PolicySettings

__all__ = [
    "ConfigValidationError",
    "DEFAULT_SETTINGS",
    "DEFAULT_SPECIAL_CHARACTERS",
    "PolicySettings",
    "load_and_validate_settings",
    "load_config_file",
    "validate_settings",
]
