"""Rule set for password policy enforcement.

Each rule is a stateless predicate over one candidate password. A check
returns ``(is_violated, violation_message)`` and never raises, so the
pipeline decides how a violation is surfaced.

Rules are facts, not opinions.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from policy_config.schema import PolicySettings

from .errors import ErrorKind

RuleCheck = Callable[[Optional[str], PolicySettings], tuple[bool, str]]

NULL_PASSWORD_MESSAGE = "Password cannot be null."


@dataclass(frozen=True)
class PolicyRule:
    """A single password policy rule.

    This is a declarative statement of what is required.
    """

    name: str
    description: str
    kind: ErrorKind
    check: RuleCheck


def check_length(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check the minimum length floor. Null is checked first."""
    if password is None:
        return True, NULL_PASSWORD_MESSAGE

    if len(password) < settings.min_length:
        return True, f"The password must be at least {settings.min_length} characters long"

    return False, ""


def check_digit(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check for at least one decimal digit."""
    if password is None or not any(c.isdecimal() for c in password):
        return True, "Password must contain at least one digit."

    return False, ""


def check_upper_alpha(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check for at least one uppercase letter."""
    if password is None or not any(c.isupper() for c in password):
        return True, "Password must contain at least one uppercase alphabetic character."

    return False, ""


def check_lower_alpha(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check for at least one lowercase letter."""
    if password is None or not any(c.islower() for c in password):
        return True, "The password must contain at least one lowercase alphabetic character"

    return False, ""


def check_special_char(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check for at least one character from the literal special set.

    Membership is tested character by character, so ``-`` is never read as a range.
    """
    specials = settings.special_character_set
    if password is None or not any(c in specials for c in password):
        return True, "The password must contain at least one special character"

    return False, ""


def check_sequence(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check that no character repeats more than ``max_repeat`` times in a row."""
    message = (
        f"Password cannot contain more than {settings.max_repeat} "
        "of the same character in sequence."
    )
    if password is None:
        return True, message

    run_length = 0
    previous = None
    for c in password:
        run_length = run_length + 1 if c == previous else 1
        previous = c
        if run_length > settings.max_repeat:
            return True, message

    return False, ""


def check_weak_length(password: Optional[str], settings: PolicySettings) -> tuple[bool, str]:
    """Check that the length is outside the weak band.

    A password long enough to pass the length floor can still land in the
    weak band; the pipeline treats that as a failure.
    """
    if password is None:
        return True, NULL_PASSWORD_MESSAGE

    if settings.weak_min_length <= len(password) <= settings.weak_max_length:
        return True, (
            f"Password is weak because its length is between "
            f"{settings.weak_min_length} and {settings.weak_max_length} characters."
        )

    return False, ""


def define_rules(settings: PolicySettings) -> list[PolicyRule]:
    """Define all policy rules in canonical pipeline order.

    This should feel like configuration, not logic.
    """
    return [
        PolicyRule(
            name="length",
            description=f"Password must be at least {settings.min_length} characters long",
            kind=ErrorKind.LENGTH,
            check=check_length,
        ),
        PolicyRule(
            name="digit",
            description="Password must contain a decimal digit",
            kind=ErrorKind.NO_DIGIT,
            check=check_digit,
        ),
        PolicyRule(
            name="upper_alpha",
            description="Password must contain an uppercase letter",
            kind=ErrorKind.NO_UPPER_ALPHA,
            check=check_upper_alpha,
        ),
        PolicyRule(
            name="lower_alpha",
            description="Password must contain a lowercase letter",
            kind=ErrorKind.NO_LOWER_ALPHA,
            check=check_lower_alpha,
        ),
        PolicyRule(
            name="special_char",
            description=f"Password must contain one of {settings.special_characters}",
            kind=ErrorKind.NO_SPECIAL_CHAR,
            check=check_special_char,
        ),
        PolicyRule(
            name="sequence",
            description=(
                f"Password must not repeat a character more than "
                f"{settings.max_repeat} times in a row"
            ),
            kind=ErrorKind.INVALID_SEQUENCE,
            check=check_sequence,
        ),
        PolicyRule(
            name="weak_length",
            description=(
                f"Password length must fall outside "
                f"{settings.weak_min_length}-{settings.weak_max_length}"
            ),
            kind=ErrorKind.WEAK_PASSWORD,
            check=check_weak_length,
        ),
    ]
