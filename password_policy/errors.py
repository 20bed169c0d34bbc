"""Error kinds for password policy violations.

Every policy failure is reported through one exception type tagged with an
ErrorKind, so callers can tell violations apart without an exception class
per rule.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Named reasons a password can be rejected."""

    LENGTH = "LengthError"
    NO_DIGIT = "NoDigitError"
    NO_UPPER_ALPHA = "NoUpperAlphaError"
    NO_LOWER_ALPHA = "NoLowerAlphaError"
    NO_SPECIAL_CHAR = "NoSpecialCharError"
    INVALID_SEQUENCE = "InvalidSequenceError"
    WEAK_PASSWORD = "WeakPasswordError"
    UNMATCHED = "UnmatchedError"


class PasswordPolicyError(Exception):
    """Raised when a password violates a policy rule.

    Attributes:
        kind: Which rule was violated
        message: Human-readable reason
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"PasswordPolicyError({self.kind.value}, {self.message!r})"


@dataclass(frozen=True)
class RuleViolation:
    """Record of which rule failed and why."""

    kind: ErrorKind
    message: str
    rule: str

    def to_error(self) -> PasswordPolicyError:
        """Convert the violation into a raisable error."""
        return PasswordPolicyError(self.kind, self.message)
