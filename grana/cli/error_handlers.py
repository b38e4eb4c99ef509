"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from grana.cli.utils.formatters import format_error, format_warning


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = 255
    label = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    exit_code = 1
    label = "Configuration Error"


class InputFileError(CLIError):
    """Error reading an exported CSV file."""

    exit_code = 2
    label = "Input File Error"


class DataValidationError(CLIError):
    """Error related to data validation."""

    exit_code = 3
    label = "Data Validation Error"


class ProcessingError(CLIError):
    """Error related to data processing."""

    exit_code = 4
    label = "Processing Error"


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Report an error to the user and choose the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1-4 for known error types, 130 for cancellation,
        255 for anything unexpected)
    """
    if isinstance(error, CLIError):
        click.echo(format_error(f"{error.label}: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return error.exit_code

    if isinstance(error, ValidationError):
        # Settings are the only pydantic models built from the environment
        click.echo(
            format_error(
                f"Configuration Error: {error.error_count()} invalid setting(s)"
            )
        )
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"])
            click.echo(f"  {location}: {detail['msg']}")
        click.echo(
            format_warning("Hint: Check your environment variables or .env file")
        )
        return ConfigurationError.exit_code

    if isinstance(error, FileNotFoundError):
        click.echo(format_error(f"Input File Error: {error}"))
        click.echo(format_warning("Hint: Check the path of the exported CSV file"))
        return InputFileError.exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))

    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))

    return 255


class ErrorHandler:
    """Context manager that turns exceptions into an error report and exit code.

    Example:
        @click.command()
        def my_command():
            with with_error_handling(debug=False):
                ...
    """

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self) -> "ErrorHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        passthrough = (SystemExit, click.exceptions.Exit)
        if exc_val is not None and not isinstance(exc_val, passthrough):
            sys.exit(handle_cli_error(exc_val, self.show_debug))
        return False


def with_error_handling(debug: bool = False) -> ErrorHandler:
    """Return a context manager applying handle_cli_error() to its block."""
    return ErrorHandler(debug)


def debug_enabled(ctx: Optional[click.Context]) -> bool:
    """Whether the top-level ``--debug`` flag was given."""
    return bool(ctx is not None and ctx.obj and ctx.obj.get("debug"))
