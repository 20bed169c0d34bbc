"""Confirmation comparator for password entries."""

from typing import Optional

from .errors import ErrorKind, PasswordPolicyError


def compare_passwords_with_return(password: Optional[str], password_confirm: Optional[str]) -> bool:
    """Return True iff both entries are non-null and equal."""
    if password is None or password_confirm is None:
        return False
    return password == password_confirm


def compare_passwords(password: Optional[str], password_confirm: Optional[str]) -> None:
    """Confirm two entries match.

    Raises:
        PasswordPolicyError: UnmatchedError when either entry is null or they differ
    """
    if password is None or password_confirm is None:
        raise PasswordPolicyError(ErrorKind.UNMATCHED, "One or both of the passwords are null.")

    if not compare_passwords_with_return(password, password_confirm):
        raise PasswordPolicyError(ErrorKind.UNMATCHED, "Passwords do not match")
