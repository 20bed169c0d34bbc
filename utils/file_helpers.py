"""File helper utilities for PassCheck.

This module provides common file operations used across the application.
"""

import logging
from pathlib import Path

from .constants import (
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_PASSWORD_FORMATS,
    SUPPORTED_REPORT_FORMATS,
)

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        OSError: If directory creation fails
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to resolve or create directory {path}: {e}")
        raise


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path.

    Args:
        file_path: File path

    Returns:
        File extension (without dot), empty string if no extension
    """
    path = Path(file_path)
    return path.suffix.lstrip(".").lower()


def is_supported_password_format(file_path: str | Path) -> bool:
    """Check if file is a supported password batch format."""
    return get_file_extension(file_path) in SUPPORTED_PASSWORD_FORMATS


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported config format."""
    return get_file_extension(file_path) in SUPPORTED_CONFIG_FORMATS


def is_supported_report_format(file_path: str | Path) -> bool:
    """Check if file is a supported report export format."""
    return get_file_extension(file_path) in SUPPORTED_REPORT_FORMATS


def validate_path_safe(
    file_path: str | Path,
    must_exist: bool = False,
    must_be_file: bool = False,
) -> Path:
    """Validate path to prevent directory traversal attacks.

    This function:
    - Checks for directory traversal sequences (..)
    - Resolves paths to prevent symlink attacks
    - Validates file existence and type

    Args:
        file_path: Path to validate
        must_exist: If True, path must exist
        must_be_file: If True, path must be a file

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If must_exist=True and path doesn't exist
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        else:
            raise FileNotFoundError(f"File does not exist: {file_path}")

    return resolved
