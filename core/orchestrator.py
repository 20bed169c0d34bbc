"""Batch orchestrator for validating password files.

This module defines the BatchOrchestrator class which accepts validated
policy settings and runs load -> validate -> export for one batch file.
"""

from pathlib import Path
from typing import Optional

from artifacts.exporter import ExportError, ReportExporter
from ingestion.loader import PasswordLoadError, load_passwords
from password_policy.engine import PasswordPolicyEngine
from password_policy.report import BatchReport, collect_invalid
from policy_config.schema import PolicySettings
from utils import DEFAULT_PASSWORD_COLUMN, get_logger
from utils.constants import EXIT_POLICY_VIOLATION, EXIT_RUNTIME_ERROR, EXIT_SUCCESS

logger = get_logger(__name__)


class BatchOrchestrator:
    """Orchestrates validation of one batch of candidate passwords.

    Args:
        input_path: Batch file (.csv, .parquet or .txt)
        settings: Validated PolicySettings (defaults to the fixed policy)
        column: Password column for tabular formats
        output_path: Optional report destination (.csv, .json or .md)
        max_workers: Validate on a thread pool when greater than 1
    """

    def __init__(
        self,
        input_path: str | Path,
        settings: Optional[PolicySettings] = None,
        column: str = DEFAULT_PASSWORD_COLUMN,
        output_path: Optional[str | Path] = None,
        max_workers: Optional[int] = None,
    ):
        self.input_path = Path(input_path)
        self.engine = PasswordPolicyEngine(settings)
        self.column = column
        self.output_path = Path(output_path) if output_path else None
        self.max_workers = max_workers

        # Populated by run()
        self.report: Optional[BatchReport] = None
        self.exported_path: Optional[Path] = None

        logger.info("BatchOrchestrator initialized")
        logger.debug(f"Input: {self.input_path}, column={self.column}, workers={self.max_workers}")

    def run(self) -> int:
        """Run the batch.

        Returns:
            EXIT_SUCCESS if every password is valid, EXIT_POLICY_VIOLATION if
            any is invalid, EXIT_RUNTIME_ERROR on load or export failure
        """
        try:
            exporter = ReportExporter(self.output_path) if self.output_path else None

            passwords = load_passwords(self.input_path, column=self.column)
            self.report = collect_invalid(passwords, engine=self.engine, max_workers=self.max_workers)

            if exporter is not None:
                self.exported_path = exporter.export(self.report)

        except PasswordLoadError as e:
            logger.error(f"Batch failed while loading passwords: {e}")
            return EXIT_RUNTIME_ERROR
        except ExportError as e:
            logger.error(f"Batch failed while exporting report: {e}")
            return EXIT_RUNTIME_ERROR

        if self.report.all_valid:
            logger.info("Batch completed: all passwords valid")
            return EXIT_SUCCESS

        logger.info(f"Batch completed with policy violations: {self.report}")
        return EXIT_POLICY_VIOLATION
