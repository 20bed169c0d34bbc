"""Validation pipeline for the password policy.

Rules run in a fixed order and the first violation wins. Later rules are
never evaluated once one fails. The engine holds no mutable state, so
validating the same password twice always gives the same outcome.
"""

from dataclasses import dataclass
from typing import Optional

from policy_config.schema import DEFAULT_SETTINGS, PolicySettings
from utils import get_logger

from .errors import RuleViolation
from .rules import PolicyRule, define_rules

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating one password.

    This is an explicit result object - no logging as substitute.
    """

    passed: bool
    violation: Optional[RuleViolation] = None

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.passed:
            return "Validation PASSED"
        return f"Validation FAILED: {self.violation.kind.value}: {self.violation.message}"


class PasswordPolicyEngine:
    """Ordered, short-circuiting password rule pipeline.

    Args:
        settings: Validated PolicySettings (defaults to the fixed policy)
    """

    def __init__(self, settings: Optional[PolicySettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.rules: tuple[PolicyRule, ...] = tuple(define_rules(self.settings))
        self._rules_by_name = {rule.name: rule for rule in self.rules}
        logger.debug(f"PasswordPolicyEngine initialized with {len(self.rules)} rules")

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def check_rule(self, name: str, password: Optional[str]) -> Optional[RuleViolation]:
        """Run a single named rule.

        Returns:
            RuleViolation if the rule fails, None otherwise

        Raises:
            KeyError: If no rule has that name
        """
        try:
            rule = self._rules_by_name[name]
        except KeyError:
            raise KeyError(f"Unknown rule '{name}'. Known rules: {', '.join(self.rule_names)}") from None
        return self._apply(rule, password)

    def validate(self, password: Optional[str]) -> ValidationResult:
        """Validate a password against every rule, stopping at the first failure."""
        for rule in self.rules:
            violation = self._apply(rule, password)
            if violation is not None:
                logger.debug(f"Rule '{rule.name}' failed ({violation.kind.value})")
                return ValidationResult(passed=False, violation=violation)

        return ValidationResult(passed=True)

    def enforce(self, password: Optional[str]) -> bool:
        """Throwing form of validate().

        Returns:
            True when every rule passes

        Raises:
            PasswordPolicyError: For the first violated rule
        """
        result = self.validate(password)
        if not result.passed:
            raise result.violation.to_error()
        return True

    def _apply(self, rule: PolicyRule, password: Optional[str]) -> Optional[RuleViolation]:
        is_violated, message = rule.check(password, self.settings)
        if is_violated:
            return RuleViolation(kind=rule.kind, message=message, rule=rule.name)
        return None
