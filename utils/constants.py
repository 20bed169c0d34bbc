"""Constants for PassCheck.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_POLICY_VIOLATION = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_VERSION = "1.0.0"

# Supported file formats
SUPPORTED_PASSWORD_FORMATS = ["csv", "parquet", "txt"]
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]
SUPPORTED_REPORT_FORMATS = ["csv", "json", "md"]

# Default values
DEFAULT_PASSWORD_COLUMN = "password"
