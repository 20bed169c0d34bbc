"""Shared utilities for PassCheck.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_VERSION,
    DEFAULT_PASSWORD_COLUMN,
    EXIT_INVALID_CONFIG,
    EXIT_POLICY_VIOLATION,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_PASSWORD_FORMATS,
    SUPPORTED_REPORT_FORMATS,
)
from .file_helpers import (
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    is_supported_password_format,
    is_supported_report_format,
    PathValidationError,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_VERSION",
    "DEFAULT_PASSWORD_COLUMN",
    "EXIT_INVALID_CONFIG",
    "EXIT_POLICY_VIOLATION",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_PASSWORD_FORMATS",
    "SUPPORTED_REPORT_FORMATS",
    "ensure_directory",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "is_supported_password_format",
    "is_supported_report_format",
    "PathValidationError",
    "setup_logging",
    "validate_path_safe",
]
