"""
Lox Scanner Error Hierarchy
===========================

This module defines the exceptions and diagnostic plumbing for the scanner.
Lexical problems are never raised out of the scan loop: they are built as
exception objects, collected, and handed to a reporter so that one scan can
surface every problem in a buffer.

Exception Hierarchy
-------------------
LoxError (base)
├── LexicalError - problem found while scanning source text
│   ├── UnexpectedCharacterError - character outside every lexeme category
│   ├── UnterminatedStringError - string reaches end of input
│   └── UnterminatedCommentError - block comment reaches end of input
├── ScannerStateError - scanner instance used twice
└── TooManyErrors - ErrorCollector limit reached

Message Formats
---------------
Detailed form (``str(error)``):

    script.lox:3:9: error: Unexpected character.
        var a = @;
                ^
    hint: remove the character or move it into a string

One-line form (``format_report``), as printed by the interactive tools:

    [line 3] Error: Unexpected character.
"""

from dataclasses import dataclass
from typing import Callable, Optional


# Signature of a diagnostic sink: (line, where, message)
Reporter = Callable[[int, str, str], None]


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all scanner errors.

    Callers can catch every error raised by this package with a single
    except clause:

        try:
            tokens = Scanner(source).scan_tokens()
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


def format_report(line: int, where: str, message: str) -> str:
    """Render a diagnostic in the one-line ``[line N] Error: ...`` form."""
    return f"[line {line}] Error{where}: {message}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(LoxError):
    """
    A problem found while scanning.

    Attributes:
        message: The error description
        location: Where scanning stopped when the error was found
        where: Location hint passed to reporters ("" for lexical errors)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        where: str = "",
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.where = where
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        """Line number reported for this error."""
        return self.location.line

    def report_line(self) -> str:
        """Return the one-line ``[line N] Error: ...`` rendering."""
        return format_report(self.line, self.where, self.message)

    def _format_message(self) -> str:
        """
        Format the error with location, source context, and hint.

            script.lox:1:5: error: Unterminated string.
                a = "open
                         ^
            hint: add a closing '"' to complete the string
        """
        parts = [f"{self.location}: error: {self.message}"]

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexicalError):
    """
    Character that cannot start any lexeme.

    Scanning resumes at the character after it.
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            "Unexpected character.",
            location,
            hint=f"'{char}' (U+{ord(char):04X}) is not valid outside a string or comment",
            source_line=source_line,
        )


class UnterminatedStringError(LexicalError):
    """
    String literal that reaches end of input before its closing quote.

    Example:
        print "hello;    // Missing closing quote
    """

    def __init__(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated string.",
            location,
            hint="add a closing '\"' to complete the string",
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """Block comment that reaches end of input before ``*/``."""

    def __init__(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated block comment.",
            location,
            hint="add */ to close the comment; block comments do not nest",
            source_line=source_line,
        )


# =============================================================================
# Misuse Errors
# =============================================================================

class ScannerStateError(LoxError):
    """
    Scanner instance reused.

    A Scanner owns the cursor for exactly one pass over one buffer.
    Create a new Scanner for every scan.
    """
    pass


class TooManyErrors(LoxError):
    """Raised by ErrorCollector once max_errors errors have been added."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Too many errors ({limit}), stopping")


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    The collector is itself a Reporter: pass it to a Scanner as the
    ``reporter`` argument, or feed it error objects with ``add``.

    Example:
        collector = ErrorCollector(max_errors=50)
        for error in scan(source).errors:
            collector.add(error)

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[LexicalError] = []
        self.reports: list[tuple[int, str, str]] = []
        self.max_errors = max_errors
        # One entry per diagnostic in arrival order; None when only the
        # (line, where, message) triple was received
        self._details: list[Optional[LexicalError]] = []

    def __call__(self, line: int, where: str, message: str) -> None:
        """
        Receive a diagnostic through the Reporter interface.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self._record((line, where, message), None)

    def add(self, error: LexicalError) -> None:
        """Add a full error object, keeping its source context for report()."""
        self.errors.append(error)
        self._record((error.line, error.where, error.message), error)

    def _record(self, entry: tuple[int, str, str], error: Optional[LexicalError]) -> None:
        self.reports.append(entry)
        self._details.append(error)
        if len(self.reports) >= self.max_errors:
            raise TooManyErrors(self.max_errors)

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been received."""
        return len(self.reports) > 0

    def error_count(self) -> int:
        """Return the number of diagnostics received."""
        return len(self.reports)

    def report(self) -> str:
        """Format all collected errors, followed by a summary line."""
        lines = []

        for (line, where, message), error in zip(self.reports, self._details):
            if error is not None:
                lines.append(str(error))
                lines.append("")
            else:
                lines.append(format_report(line, where, message))

        count = self.error_count()
        error_word = "error" if count == 1 else "errors"
        lines.append(f"{count} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()
        self.reports.clear()
        self._details.clear()
