"""
loxscan - Lox Token Dump Tool
=============================

Runs the scanner over a Lox script, or over lines typed at a prompt, and
prints one token per line. Lexical errors go to stderr.

Usage Examples
--------------
Scan a file:
    $ loxscan hello.lox

Interactive prompt (one line at a time):
    $ loxscan
    > var x = 10;

Detailed diagnostics with source context:
    $ loxscan --show-context broken.lox

Exit Codes
----------
0 on success, 65 when the script has lexical errors, 66 when the script
cannot be read, 2 for invalid arguments.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lox_scanner import __version__
from lox_scanner.cli.errors import ExitCode, handle_cli_exception
from lox_scanner.errors import ErrorCollector, Reporter, TooManyErrors, format_report
from lox_scanner.lexer import Scanner, ScannerOptions, ScanResult

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def make_reporter(collector: ErrorCollector, show_context: bool) -> Reporter:
    """
    Build the reporter handed to the scanner.

    Diagnostics are echoed to stderr as they are found, unless the detailed
    form is requested, in which case they are printed after the scan.
    """
    def report(line: int, where: str, message: str) -> None:
        if not show_context:
            click.echo(format_report(line, where, message), err=True)
        collector(line, where, message)

    return report


def run_source(
    source: str,
    options: ScannerOptions,
    max_errors: int,
    show_context: bool = False,
) -> ScanResult:
    """
    Scan one buffer, print its tokens, and report its errors.

    Tokens are only printed when the scan had no errors.

    Raises:
        TooManyErrors: If the buffer has max_errors errors or more
    """
    collector = ErrorCollector(max_errors=max_errors)
    scanner = Scanner(source, options, make_reporter(collector, show_context))

    try:
        tokens = scanner.scan_tokens()
    except TooManyErrors:
        if show_context:
            _echo_context(scanner)
        raise

    if show_context:
        _echo_context(scanner)

    result = ScanResult(tuple(tokens), tuple(scanner.errors))
    if not result.had_error:
        for token in tokens:
            click.echo(str(token))

    return result


def _echo_context(scanner: Scanner) -> None:
    for error in scanner.errors:
        click.echo(str(error), err=True)


def run_file(path: Path, max_errors: int, show_context: bool, verbose: bool) -> None:
    """Scan a script file and exit with DATA_ERROR if it has lexical errors."""
    source = path.read_text(encoding="utf-8")
    logger.debug(f"Read {len(source)} characters from {path}")

    result = run_source(source, ScannerOptions(filename=str(path)), max_errors, show_context)

    if verbose:
        click.echo(
            f"Scanned {path}: {len(result.tokens)} tokens, {len(result.errors)} errors",
            err=True,
        )

    if result.had_error:
        sys.exit(ExitCode.DATA_ERROR)


def run_prompt(max_errors: int, show_context: bool) -> None:
    """
    Read-scan-print loop.

    Every line is scanned on its own, starting at line 1. Errors on one
    line do not end the session; end of input does.
    """
    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            return

        try:
            run_source(line, ScannerOptions(filename="<stdin>"), max_errors, show_context)
        except TooManyErrors as e:
            click.echo(f"Error: {e}", err=True)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "script",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=100,
    show_default=True,
    help="Stop after this many lexical errors",
)
@click.option(
    "--show-context",
    is_flag=True,
    help="Print errors with the offending source line and a caret",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    script: Optional[Path],
    max_errors: int,
    show_context: bool,
    verbose: bool,
) -> None:
    """
    Scan Lox source code and print its tokens.

    SCRIPT is the Lox file to scan. Without SCRIPT, an interactive
    prompt scans each line as it is entered.

    \b
    Examples:
        loxscan hello.lox                 # Dump tokens of a file
        loxscan --show-context bad.lox    # Errors with source context
        loxscan                           # Interactive prompt
    """
    setup_logging(verbose)

    try:
        if script is None:
            run_prompt(max_errors, show_context)
        else:
            run_file(script, max_errors, show_context, verbose)
    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
