"""
Lox Scanner - Lexical Analysis for the Lox Scripting Language
=============================================================

This package turns Lox source text into the token sequence consumed by a
Lox parser. It reports malformed input (unexpected characters, unterminated
strings and comments) without stopping, so one scan surfaces every lexical
problem in a buffer.

Main Components
---------------
- **tokens**: TokenType, Token and the reserved-word table
- **cursor**: position and line tracking over a source buffer
- **lexer**: the Scanner and the one-call ``scan()`` helper
- **errors**: error hierarchy and the ErrorCollector diagnostic sink
- **cli**: the ``loxscan`` token dump tool

Quick Start
-----------
    >>> from lox_scanner import scan
    >>> result = scan("print 1 + 2;")
    >>> [t.type.name for t in result.tokens]
    ['PRINT', 'NUMBER', 'PLUS', 'NUMBER', 'SEMICOLON', 'EOF']
    >>> result.had_error
    False

Or from the command line:
    $ loxscan script.lox
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lox_scanner.tokens import (
    KEYWORDS,
    Token,
    TokenType,
)
from lox_scanner.cursor import Cursor, NO_CHAR
from lox_scanner.lexer import (
    CharClass,
    Scanner,
    ScannerOptions,
    ScanResult,
    classify,
    scan,
)
from lox_scanner.errors import (
    LoxError,
    LexicalError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UnterminatedCommentError,
    ScannerStateError,
    TooManyErrors,
    ErrorCollector,
    Reporter,
    SourceLocation,
    format_report,
)

__all__ = [
    "__version__",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    # Scanning
    "Cursor",
    "NO_CHAR",
    "CharClass",
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    "classify",
    "scan",
    # Errors
    "LoxError",
    "LexicalError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedCommentError",
    "ScannerStateError",
    "TooManyErrors",
    "ErrorCollector",
    "Reporter",
    "SourceLocation",
    "format_report",
]
