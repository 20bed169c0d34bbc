"""Settings loader for the password policy.

This module handles loading YAML/JSON configuration files and validating
them against PolicySettings. It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Union

import yaml
from pydantic import ValidationError

from policy_config.schema import PolicySettings
from utils import PathValidationError, get_logger, is_supported_config_format, validate_path_safe

logger = get_logger(__name__)


class ConfigValidationError(Exception):
    """Raised when policy configuration loading or validation fails."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration

    Raises:
        ConfigValidationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise ConfigValidationError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise ConfigValidationError(f"Configuration file not found: {config_path}") from e

    suffix = config_path.suffix.lower()
    if not is_supported_config_format(config_path):
        raise ConfigValidationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigValidationError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigValidationError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigValidationError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def validate_settings(config: dict) -> PolicySettings:
    """Validate configuration against PolicySettings.

    A top-level ``policy`` key is unwrapped, so both flat files and
    ``policy:`` sections are accepted.

    Args:
        config: Configuration dictionary

    Returns:
        Validated PolicySettings instance

    Raises:
        ConfigValidationError: If validation fails with user-friendly error message
    """
    if set(config) == {"policy"}:
        config = config["policy"] or {}
        if not isinstance(config, dict):
            raise ConfigValidationError(
                f"'policy' section must be a dictionary, got {type(config).__name__}"
            )

    try:
        return PolicySettings(**config)
    except ValidationError as e:
        error_msg = _format_validation_error(e)
        raise ConfigValidationError(f"Policy configuration is invalid:\n{error_msg}") from e


def _format_validation_error(error: ValidationError) -> str:
    """Format Pydantic validation errors for user-friendly display."""
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", [])) or "policy"
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def load_and_validate_settings(config_path: Union[str, pathlib.Path]) -> PolicySettings:
    """Load and validate policy settings from a configuration file.

    This is the main entry point for settings validation.

    Args:
        config_path: Path to YAML or JSON configuration file

    Returns:
        Validated PolicySettings instance

    Raises:
        ConfigValidationError: If loading or validation fails
    """
    config = load_config_file(config_path)
    return validate_settings(config)
