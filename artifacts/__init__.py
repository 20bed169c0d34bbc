"""Report artifacts: exporting batch validation results."""

from .exporter import ExportError, ReportExporter, render_markdown
from .writers import FileWriteError

__all__ = [
    "ExportError",
    "FileWriteError",
    "ReportExporter",
    "render_markdown",
]
