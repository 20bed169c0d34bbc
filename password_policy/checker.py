"""Function-level password checking API.

Individual checks raise PasswordPolicyError tagged with their ErrorKind as
soon as they fail. is_valid_password() lets the first failure propagate.
get_invalid_passwords() is the only entry point that turns failures into
plain records.
"""

from typing import Iterable, Optional

from .engine import PasswordPolicyEngine
from .errors import ErrorKind, PasswordPolicyError
from .report import collect_invalid

_default_engine = PasswordPolicyEngine()


def _enforce_rule(name: str, password: Optional[str]) -> None:
    violation = _default_engine.check_rule(name, password)
    if violation is not None:
        raise violation.to_error()


def is_valid_password(password: Optional[str]) -> bool:
    """Return True if the password passes every rule, else raise the first violation."""
    return _default_engine.enforce(password)


def is_valid_length(password: Optional[str]) -> bool:
    """Return True or raise LengthError (null included)."""
    _enforce_rule("length", password)
    return True


def has_between_six_and_nine_chars(password: Optional[str]) -> None:
    """Raise LengthError when the password is shorter than the minimum length.

    Only the floor is checked; the upper bound lives in is_weak_password().
    """
    violation = _default_engine.check_rule("length", password)
    if violation is None:
        return
    if password is None:
        raise violation.to_error()
    min_length = _default_engine.settings.min_length
    raise PasswordPolicyError(
        ErrorKind.LENGTH, f"Password length must be at least {min_length} characters."
    )


def has_digit(password: Optional[str]) -> bool:
    _enforce_rule("digit", password)
    return True


def has_upper_alpha(password: Optional[str]) -> bool:
    _enforce_rule("upper_alpha", password)
    return True


def has_lower_alpha(password: Optional[str]) -> bool:
    _enforce_rule("lower_alpha", password)
    return True


def has_special_char(password: Optional[str]) -> bool:
    _enforce_rule("special_char", password)
    return True


def has_invalid_sequence(password: Optional[str]) -> bool:
    """Return False when no character repeats too often, else raise InvalidSequenceError."""
    _enforce_rule("sequence", password)
    return False


def is_weak_password(password: Optional[str]) -> bool:
    """Raise WeakPasswordError for null or weak-band lengths.

    Never returns True: the check either fails or returns False.
    """
    _enforce_rule("weak_length", password)
    return False


def get_invalid_passwords(passwords: Iterable[Optional[str]]) -> list[tuple[Optional[str], str]]:
    """Return (password, reason) pairs for every failing candidate, in input order."""
    return collect_invalid(passwords, engine=_default_engine).to_records()
