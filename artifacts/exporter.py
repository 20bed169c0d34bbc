"""Exporter for batch reports.

This module writes an existing BatchReport in human-readable and
machine-readable formats. It does not validate anything itself.
"""

from pathlib import Path

from password_policy.report import BatchReport
from utils import (
    PathValidationError,
    get_file_extension,
    get_logger,
    is_supported_report_format,
    validate_path_safe,
)

from .writers import FileWriteError, safe_write_dataframe, safe_write_json, safe_write_text

logger = get_logger(__name__)


class ExportError(Exception):
    """Raised when export operations fail."""

    pass


class ReportExporter:
    """Exports a BatchReport to CSV, JSON or Markdown.

    The format follows the output file extension.
    """

    def __init__(self, output_path: str | Path, overwrite: bool = True):
        """Initialize report exporter.

        Args:
            output_path: Destination file (.csv, .json or .md)
            overwrite: Replace an existing file

        Raises:
            ExportError: If the path is unsafe or the format unsupported
        """
        try:
            self.output_path = validate_path_safe(output_path)
        except PathValidationError as e:
            raise ExportError(f"Invalid report path: {e}") from e

        self.format = get_file_extension(self.output_path)
        if not is_supported_report_format(self.output_path):
            raise ExportError(
                f"Unsupported report format: .{self.format}. Supported formats: .csv, .json, .md"
            )
        self.overwrite = overwrite
        logger.debug(f"ReportExporter initialized: {self.output_path} ({self.format})")

    def export(self, report: BatchReport) -> Path:
        """Write the report.

        Returns:
            Path to the written file

        Raises:
            ExportError: If writing fails
        """
        try:
            if self.format == "csv":
                safe_write_dataframe(report.to_dataframe(), self.output_path, overwrite=self.overwrite)
            elif self.format == "json":
                safe_write_json(self._to_json(report), self.output_path, overwrite=self.overwrite)
            else:
                safe_write_text(render_markdown(report), self.output_path, overwrite=self.overwrite)
        except FileWriteError as e:
            raise ExportError(f"Failed to export report: {e}") from e

        logger.info(f"Report exported: {self.output_path} ({self.format})")
        return self.output_path

    @staticmethod
    def _to_json(report: BatchReport) -> dict:
        return {
            "total": report.total,
            "valid_count": report.valid_count,
            "invalid_count": report.invalid_count,
            "invalid": report.to_dicts(),
        }


def render_markdown(report: BatchReport) -> str:
    """Render a BatchReport as a Markdown document."""
    lines = [
        "# Password Validation Report",
        "",
        f"- Total: {report.total}",
        f"- Valid: {report.valid_count}",
        f"- Invalid: {report.invalid_count}",
        "",
    ]

    if report.all_valid:
        lines.append("All passwords passed validation.")
    else:
        lines.extend(["| # | Password | Kind | Reason |", "|---|---|---|---|"])
        for index, entry in enumerate(report, start=1):
            password = "(null)" if entry.password is None else _escape_cell(entry.password)
            lines.append(f"| {index} | `{password}` | {entry.kind.value} | {entry.reason} |")

    return "\n".join(lines) + "\n"


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("`", "'")
