"""Safe file writers for report artifacts.

Paths are resolved before writing and existing files are only replaced
when overwrite=True.
"""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from utils import ensure_directory

logger = logging.getLogger(__name__)


class FileWriteError(Exception):
    """Raised when writing an artifact fails."""

    pass


def _resolve_target(file_path: Path, overwrite: bool) -> Path:
    try:
        resolved_path = file_path.resolve()
    except (OSError, RuntimeError) as e:
        raise FileWriteError(f"Failed to resolve path {file_path}: {e}") from e

    if resolved_path.exists() and not overwrite:
        raise FileWriteError(f"File already exists: {resolved_path} (use overwrite=True to replace)")

    try:
        ensure_directory(resolved_path.parent)
    except (OSError, RuntimeError) as e:
        raise FileWriteError(f"Failed to create directory for {resolved_path}: {e}") from e

    return resolved_path


def safe_write_json(data: Any, file_path: Path, overwrite: bool = False) -> None:
    """Safely write JSON data to file.

    Raises:
        FileWriteError: If write fails or file exists and overwrite=False
    """
    resolved_path = _resolve_target(file_path, overwrite)
    try:
        with open(resolved_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug(f"JSON written to: {resolved_path}")
    except OSError as e:
        raise FileWriteError(f"Failed to write JSON to {resolved_path}: I/O error: {e}") from e
    except (TypeError, ValueError) as e:
        raise FileWriteError(f"Failed to serialize data to JSON for {resolved_path}: {e}") from e


def safe_write_dataframe(df: pd.DataFrame, file_path: Path, overwrite: bool = False) -> None:
    """Safely write a DataFrame to CSV.

    Raises:
        FileWriteError: If write fails or file exists and overwrite=False
    """
    resolved_path = _resolve_target(file_path, overwrite)
    try:
        df.to_csv(resolved_path, index=False)
        logger.debug(f"DataFrame written to: {resolved_path}")
    except OSError as e:
        raise FileWriteError(f"Failed to write DataFrame to {resolved_path}: I/O error: {e}") from e


def safe_write_text(text: str, file_path: Path, overwrite: bool = False) -> None:
    """Safely write text to file.

    Raises:
        FileWriteError: If write fails or file exists and overwrite=False
    """
    resolved_path = _resolve_target(file_path, overwrite)
    try:
        with open(resolved_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug(f"Text written to: {resolved_path}")
    except OSError as e:
        raise FileWriteError(f"Failed to write text to {resolved_path}: I/O error: {e}") from e
    except UnicodeEncodeError as e:
        raise FileWriteError(f"Failed to write text to {resolved_path}: Encoding error: {e}") from e
