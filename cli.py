"""Command-line interface for PassCheck.

This module provides the CLI entry point for the PassCheck tool.
It handles argument parsing, settings validation, and command execution.
"""

import argparse
import sys
from typing import Optional

from core.orchestrator import BatchOrchestrator
from password_policy import (
    PasswordPolicyEngine,
    PasswordPolicyError,
    compare_passwords,
)
from policy_config import ConfigValidationError, PolicySettings, load_and_validate_settings
from utils import (
    APP_VERSION,
    DEFAULT_PASSWORD_COLUMN,
    EXIT_INVALID_CONFIG,
    EXIT_POLICY_VIOLATION,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="passcheck",
        description="PassCheck - password policy validation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML or JSON file overriding the policy settings",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log warnings and errors",
    )

    subparsers = parser.add_subparsers(
        dest="command", help="Command to execute", required=True
    )

    check_parser = subparsers.add_parser("check", help="Validate one or more passwords")
    check_parser.add_argument("passwords", nargs="+", help="Passwords to validate")

    batch_parser = subparsers.add_parser("batch", help="Validate a file of passwords")
    batch_parser.add_argument("input", help="Batch file (.csv, .parquet or .txt)")
    batch_parser.add_argument(
        "--column",
        default=DEFAULT_PASSWORD_COLUMN,
        help=f"Password column for tabular files (default: {DEFAULT_PASSWORD_COLUMN})",
    )
    batch_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Export the report to .csv, .json or .md",
    )
    batch_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Validate on this many threads",
    )

    compare_parser = subparsers.add_parser("compare", help="Confirm two passwords match")
    compare_parser.add_argument("password")
    compare_parser.add_argument("password_confirm")

    return parser.parse_args(argv)


def run_check(passwords: list[str], settings: PolicySettings) -> int:
    engine = PasswordPolicyEngine(settings)
    exit_code = EXIT_SUCCESS

    for index, password in enumerate(passwords, start=1):
        result = engine.validate(password)
        if result.passed:
            print(f"✓ Password {index} is valid")
        else:
            exit_code = EXIT_POLICY_VIOLATION
            print(f"✗ Password {index}: {result.violation.kind.value}: {result.violation.message}")

    return exit_code


def run_batch(args: argparse.Namespace, settings: PolicySettings) -> int:
    orchestrator = BatchOrchestrator(
        args.input,
        settings=settings,
        column=args.column,
        output_path=args.output,
        max_workers=args.workers,
    )
    exit_code = orchestrator.run()

    if orchestrator.report is None:
        print(f"✗ Batch failed with exit code: {exit_code}", file=sys.stderr)
        return exit_code

    for entry in orchestrator.report:
        print(entry)
    print(orchestrator.report)
    if orchestrator.exported_path:
        print(f"✓ Report written to {orchestrator.exported_path}")

    return exit_code


def run_compare(password: str, password_confirm: str) -> int:
    try:
        compare_passwords(password, password_confirm)
    except PasswordPolicyError as e:
        print(f"✗ {e.message}")
        return EXIT_POLICY_VIOLATION

    print("✓ Passwords match")
    return EXIT_SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        settings = load_and_validate_settings(args.config) if args.config else PolicySettings()
    except ConfigValidationError as e:
        print(f"✗ Invalid policy configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        if args.command == "check":
            return run_check(args.passwords, settings)
        if args.command == "batch":
            return run_batch(args, settings)
        if args.command == "compare":
            return run_compare(args.password, args.password_confirm)
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {e}", file=sys.stderr)
        logger.exception("Unexpected error during command execution")
        return EXIT_RUNTIME_ERROR

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
