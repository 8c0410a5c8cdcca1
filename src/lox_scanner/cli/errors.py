"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes across the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    USAGE = 2            # Invalid arguments (Click's own usage errors)
    DATA_ERROR = 65      # Input had lexical errors or was not UTF-8
    NO_INPUT = 66        # Input file missing or unreadable
    INTERNAL_ERROR = 70  # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI tools.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from lox_scanner.errors import LoxError

    if isinstance(error, LoxError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DATA_ERROR)

    elif isinstance(error, (FileNotFoundError, IsADirectoryError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.NO_INPUT)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: input is not valid UTF-8: {error}", err=True)
        sys.exit(ExitCode.DATA_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
