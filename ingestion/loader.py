"""Candidate password loader.

This module loads batches of candidate passwords from disk in supported
formats (CSV, Parquet, plain text). Missing values become None so they are
validated like any other candidate instead of being dropped.
"""

from pathlib import Path
from typing import Optional

import pandas as pd

from utils import (
    DEFAULT_PASSWORD_COLUMN,
    PathValidationError,
    get_logger,
    is_supported_password_format,
    validate_path_safe,
)

logger = get_logger(__name__)


class PasswordLoadError(Exception):
    """Raised when a password batch cannot be loaded."""

    pass


def load_passwords(file_path: str | Path, column: str = DEFAULT_PASSWORD_COLUMN) -> list[Optional[str]]:
    """Load candidate passwords from disk.

    CSV and Parquet files must have a header naming the password column.
    Plain text files hold one password per line; an empty line is a missing
    password.

    Args:
        file_path: Path to the batch file
        column: Name of the password column for tabular formats

    Returns:
        Passwords in file order, None for missing entries

    Raises:
        PasswordLoadError: If the file doesn't exist, format is unsupported, or loading fails
    """
    try:
        file_path = validate_path_safe(file_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise PasswordLoadError(f"Invalid password file path: {e}") from e
    except FileNotFoundError as e:
        raise PasswordLoadError(f"Password file not found: {file_path}") from e

    suffix = file_path.suffix.lower()
    if not is_supported_password_format(file_path):
        raise PasswordLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .parquet, .txt"
        )

    logger.info(f"Loading passwords from: {file_path}")

    try:
        if suffix == ".txt":
            # Universal newlines turn \r\n and \r into \n; no other separator splits a password
            lines = file_path.read_text(encoding="utf-8").split("\n")
            if lines[-1] == "":
                lines.pop()
            passwords = [line if line else None for line in lines]
        else:
            if suffix == ".csv":
                # Only empty cells are missing; "NA" or "null" are real passwords
                df = pd.read_csv(
                    file_path, dtype=str, keep_default_na=False, na_values=[""], skip_blank_lines=False
                )
            else:
                df = pd.read_parquet(file_path)
            passwords = _column_values(df, column, file_path)
    except PasswordLoadError:
        raise
    except OSError as e:
        raise PasswordLoadError(f"Failed to read password file {file_path}: I/O error: {e}") from e
    except UnicodeDecodeError as e:
        raise PasswordLoadError(f"Failed to decode password file {file_path}: Encoding error: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise PasswordLoadError(f"Password file is empty: {file_path}") from e
    except pd.errors.ParserError as e:
        raise PasswordLoadError(f"Failed to parse password file {file_path}: {e}") from e
    except ImportError as e:
        raise PasswordLoadError(
            f"Failed to load {file_path}: Missing required library for {suffix} format: {e}"
        ) from e

    logger.info(f"Loaded {len(passwords)} candidate password(s)")
    return passwords


def _column_values(df: pd.DataFrame, column: str, file_path: Path) -> list[Optional[str]]:
    if column not in df.columns:
        raise PasswordLoadError(
            f"Column '{column}' not found in {file_path}. Available columns: {list(df.columns)}"
        )
    return [None if pd.isna(value) else str(value) for value in df[column].tolist()]
