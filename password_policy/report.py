"""Batch reporting over many candidate passwords.

The reporter consumes ValidationResult values, so a policy violation never
escapes the batch as an exception and one bad entry never aborts the rest.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

import pandas as pd

from utils import get_logger

from .engine import PasswordPolicyEngine, ValidationResult
from .errors import ErrorKind

logger = get_logger(__name__)


@dataclass(frozen=True)
class InvalidPasswordEntry:
    """One failing candidate paired with the reason it failed."""

    password: Optional[str]
    reason: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.password} {self.reason}"


@dataclass
class BatchReport:
    """Ordered report of failing candidates.

    Entries keep the input order; passing candidates contribute nothing.
    """

    entries: list[InvalidPasswordEntry] = field(default_factory=list)
    total: int = 0

    def __iter__(self) -> Iterator[InvalidPasswordEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def invalid_count(self) -> int:
        return len(self.entries)

    @property
    def valid_count(self) -> int:
        return self.total - len(self.entries)

    @property
    def all_valid(self) -> bool:
        return not self.entries

    def to_records(self) -> list[tuple[Optional[str], str]]:
        """Report as (password, reason) pairs."""
        return [(entry.password, entry.reason) for entry in self.entries]

    def to_dicts(self) -> list[dict[str, Any]]:
        return [
            {"password": entry.password, "kind": entry.kind.value, "reason": entry.reason}
            for entry in self.entries
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Report as a DataFrame with password, kind and reason columns."""
        return pd.DataFrame(self.to_dicts(), columns=["password", "kind", "reason"])

    def __str__(self) -> str:
        return f"{self.invalid_count} of {self.total} password(s) invalid"


def collect_invalid(
    passwords: Iterable[Optional[str]],
    engine: Optional[PasswordPolicyEngine] = None,
    max_workers: Optional[int] = None,
) -> BatchReport:
    """Validate every candidate and collect the failures.

    Args:
        passwords: Candidate passwords, None entries allowed
        engine: Pipeline to use (defaults to the fixed policy)
        max_workers: Validate on a thread pool when greater than 1

    Returns:
        BatchReport in input order
    """
    engine = engine or PasswordPolicyEngine()
    candidates = list(passwords)

    if max_workers and max_workers > 1 and len(candidates) > 1:
        # map() yields results in submission order
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results: list[ValidationResult] = list(executor.map(engine.validate, candidates))
    else:
        results = [engine.validate(password) for password in candidates]

    report = BatchReport(total=len(candidates))
    for password, result in zip(candidates, results):
        if not result.passed:
            report.entries.append(
                InvalidPasswordEntry(
                    password=password,
                    reason=result.violation.message,
                    kind=result.violation.kind,
                )
            )

    logger.info(f"Validated {report.total} password(s): {report.invalid_count} invalid")
    return report
