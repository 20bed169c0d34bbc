"""Ingestion of candidate password batches."""

from .loader import PasswordLoadError, load_passwords

__all__ = [
    "load_passwords",
    "PasswordLoadError",
]
