"""Password policy definition and enforcement.

Rules check, they do not fix. The pipeline stops at the first violation.
"""

from .checker import (
    get_invalid_passwords,
    has_between_six_and_nine_chars,
    has_digit,
    has_invalid_sequence,
    has_lower_alpha,
    has_special_char,
    has_upper_alpha,
    is_valid_length,
    is_valid_password,
    is_weak_password,
)
from .comparator import compare_passwords, compare_passwords_with_return
from .engine import PasswordPolicyEngine, ValidationResult
from .errors import ErrorKind, PasswordPolicyError, RuleViolation
from .report import BatchReport, InvalidPasswordEntry, collect_invalid
from .rules import PolicyRule, define_rules

__all__ = [
    "BatchReport",
    "ErrorKind",
    "InvalidPasswordEntry",
    "PasswordPolicyEngine",
    "PasswordPolicyError",
    "PolicyRule",
    "RuleViolation",
    "ValidationResult",
    "collect_invalid",
    "compare_passwords",
    "compare_passwords_with_return",
    "define_rules",
    "get_invalid_passwords",
    "has_between_six_and_nine_chars",
    "has_digit",
    "has_invalid_sequence",
    "has_lower_alpha",
    "has_special_char",
    "has_upper_alpha",
    "is_valid_length",
    "is_valid_password",
    "is_weak_password",
]
