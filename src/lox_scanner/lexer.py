"""
Lox Lexer (Scanner)
===================

This module implements the scanner for Lox. It converts source text into
a list of tokens for the parser.

Dispatch
--------
The first character of every lexeme is mapped to a CharClass by the pure
function ``classify()``; the scanner then branches on that class. New
punctuation only needs an entry in ``SINGLE_CHAR_TOKENS`` or
``OPERATOR_TOKENS``.

| CharClass   | Characters          | Result                          |
|-------------|---------------------|---------------------------------|
| PUNCTUATION | ( ) { } , . - + ; * | one-character token             |
| OPERATOR    | ! = < >             | one- or two-character token     |
| SLASH       | /                   | comment, or SLASH               |
| WHITESPACE  | space \\r \\t         | nothing                         |
| NEWLINE     | \\n                  | nothing, next line              |
| QUOTE       | "                   | STRING                          |
| DIGIT       | 0-9                 | NUMBER                          |
| ALPHA       | a-z A-Z _           | IDENTIFIER or keyword           |
| UNKNOWN     | anything else       | error, scanning continues       |

Comments
--------
- Line: // to end of line
- Block: /* ... */, closed by the first */ (block comments do not nest)

Errors
------
Lexical errors never stop the scan. Each one is appended to
``Scanner.errors`` and passed to the optional reporter, and scanning
resumes with the next character.

Example Usage
-------------
>>> from lox_scanner.lexer import Scanner
>>> for token in Scanner("var x = 10;").scan_tokens():
...     print(token)
VAR var null
IDENTIFIER x null
EQUAL = null
NUMBER 10 10.0
SEMICOLON ; null
EOF  null
"""

import logging
import string
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Mapping, Optional

from lox_scanner.cursor import Cursor
from lox_scanner.errors import (
    LexicalError,
    Reporter,
    ScannerStateError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from lox_scanner.tokens import KEYWORDS, Token, TokenType, eof_token, keyword_type

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classification
# =============================================================================

class CharClass(Enum):
    """Category of the first character of a lexeme."""
    PUNCTUATION = auto()
    OPERATOR = auto()
    SLASH = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    QUOTE = auto()
    DIGIT = auto()
    ALPHA = auto()
    UNKNOWN = auto()


SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# char -> (type alone, type when followed by '=')
OPERATOR_TOKENS: Mapping[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = frozenset(" \r\t")
DIGITS = frozenset(string.digits)
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def classify(char: str) -> CharClass:
    """Map the first character of a lexeme to its CharClass."""
    if char in SINGLE_CHAR_TOKENS:
        return CharClass.PUNCTUATION
    if char in OPERATOR_TOKENS:
        return CharClass.OPERATOR
    if char == "/":
        return CharClass.SLASH
    if char in WHITESPACE:
        return CharClass.WHITESPACE
    if char == "\n":
        return CharClass.NEWLINE
    if char == '"':
        return CharClass.QUOTE
    if char in DIGITS:
        return CharClass.DIGIT
    if char in IDENT_START:
        return CharClass.ALPHA
    return CharClass.UNKNOWN


def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return char in DIGITS


def is_alpha_numeric(char: str) -> bool:
    """Return True for a character that may continue an identifier."""
    return char in IDENT_CHARS


# =============================================================================
# Options and Results
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration.

    Attributes:
        filename: Name used in error locations
        first_line: Line number of the first line of the buffer
        keywords: Reserved-word table used to resolve identifiers
    """
    filename: str = "<input>"
    first_line: int = 1
    keywords: Mapping[str, TokenType] = field(default_factory=lambda: KEYWORDS)


@dataclass(frozen=True)
class ScanResult:
    """
    Tokens and errors from one scan.

    When ``had_error`` is True the token list is incomplete and should not
    be handed to a parser.
    """
    tokens: tuple[Token, ...]
    errors: tuple[LexicalError, ...]

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    A Scanner owns the cursor for one pass over one buffer and cannot be
    reused; create a new instance per scan.

    Usage:
        scanner = Scanner(source_text, ScannerOptions(filename="main.lox"))
        tokens = scanner.scan_tokens()
        if scanner.errors:
            ...

    Attributes:
        source: The source code being tokenized
        options: Scanner configuration
        errors: Lexical errors found so far, in source order
    """

    def __init__(
        self,
        source: str,
        options: Optional[ScannerOptions] = None,
        reporter: Optional[Reporter] = None,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The Lox source code to tokenize
            options: Scanner configuration (uses defaults if None)
            reporter: Called with (line, where, message) for every error
        """
        self.source = source
        self.options = options or ScannerOptions()
        self.errors: list[LexicalError] = []

        self._reporter = reporter
        self._cursor = Cursor(source, self.options.first_line)
        self._started = False

    def scan_tokens(self) -> list[Token]:
        """Scan the whole buffer and return its tokens, ending with EOF."""
        return list(self.tokenize())

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code on demand.

        Yields:
            Token objects in source order, EOF last

        Raises:
            ScannerStateError: If this scanner has already been used
        """
        if self._started:
            raise ScannerStateError(
                f"scanner for {self.options.filename} has already been used"
            )
        self._started = True
        return self._generate()

    def _generate(self) -> Iterator[Token]:
        cursor = self._cursor
        logger.debug(f"Scanning {self.options.filename} ({len(self.source)} characters)")

        count = 0
        while not cursor.is_at_end():
            cursor.mark()
            token = self._scan_token()
            if token is not None:
                count += 1
                yield token

        logger.debug(
            f"Scanned {self.options.filename}: {count + 1} tokens, {len(self.errors)} errors"
        )
        yield eof_token(cursor.line)

    # =========================================================================
    # Token Creation and Error Reporting
    # =========================================================================

    def _make_token(self, token_type: TokenType, literal=None) -> Token:
        return Token(token_type, self._cursor.lexeme, literal, self._cursor.start_line)

    def _location(self, column: Optional[int] = None) -> SourceLocation:
        cursor = self._cursor
        return SourceLocation(
            self.options.filename,
            cursor.line,
            cursor.column if column is None else column,
        )

    def _report(self, error: LexicalError) -> None:
        logger.debug(f"Lexical error: {error.report_line()}")
        self.errors.append(error)
        if self._reporter is not None:
            self._reporter(error.line, error.where, error.message)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Optional[Token]:
        """
        Consume one lexeme.

        Returns:
            The token for the lexeme, or None for whitespace, comments
            and errors
        """
        cursor = self._cursor
        char = cursor.advance()
        char_class = classify(char)

        if char_class is CharClass.PUNCTUATION:
            return self._make_token(SINGLE_CHAR_TOKENS[char])

        if char_class is CharClass.OPERATOR:
            single, double = OPERATOR_TOKENS[char]
            return self._make_token(double if cursor.match("=") else single)

        if char_class is CharClass.SLASH:
            return self._slash()

        if char_class in (CharClass.WHITESPACE, CharClass.NEWLINE):
            # Cursor.advance() already counted the newline
            return None

        if char_class is CharClass.QUOTE:
            return self._string()

        if char_class is CharClass.DIGIT:
            return self._number()

        if char_class is CharClass.ALPHA:
            return self._identifier()

        self._report(UnexpectedCharacterError(
            char,
            self._location(cursor.column - 1),
            cursor.line_text(),
        ))
        return None

    def _slash(self) -> Optional[Token]:
        """Scan '/', '//' line comments and '/*' block comments."""
        cursor = self._cursor

        if cursor.match("/"):
            # A comment goes until the end of the line
            while cursor.peek() != "\n" and not cursor.is_at_end():
                cursor.advance()
            return None

        if cursor.match("*"):
            self._block_comment()
            return None

        return self._make_token(TokenType.SLASH)

    def _block_comment(self) -> None:
        """
        Skip the body of a block comment, up to and including the first */.

        Comments do not nest: in ``/* a /* b */ c */`` the comment ends
        after ``b */``.
        """
        cursor = self._cursor

        while not cursor.is_at_end():
            if cursor.peek() == "*" and cursor.peek_next() == "/":
                cursor.advance()  # consume *
                cursor.advance()  # consume /
                return
            cursor.advance()

        self._report(UnterminatedCommentError(self._location(), cursor.line_text()))

    def _string(self) -> Optional[Token]:
        """
        Scan a double-quoted string literal.

        Strings may span lines and have no escape sequences. The literal
        is the text between the quotes.
        """
        cursor = self._cursor

        while cursor.peek() != '"' and not cursor.is_at_end():
            cursor.advance()

        if cursor.is_at_end():
            self._report(UnterminatedStringError(self._location(), cursor.line_text()))
            return None

        cursor.advance()  # The closing quote

        value = self.source[cursor.start + 1:cursor.current - 1]
        return self._make_token(TokenType.STRING, value)

    def _number(self) -> Token:
        """
        Scan a number literal: digits with an optional fraction.

        A '.' is only part of the number when a digit follows it, so
        ``1.`` scans as NUMBER then DOT.
        """
        cursor = self._cursor

        while is_digit(cursor.peek()):
            cursor.advance()

        # Look for a fractional part
        if cursor.peek() == "." and is_digit(cursor.peek_next()):
            cursor.advance()  # Consume the "."

            while is_digit(cursor.peek()):
                cursor.advance()

        return self._make_token(TokenType.NUMBER, float(cursor.lexeme))

    def _identifier(self) -> Token:
        """Scan an identifier and resolve it against the keyword table."""
        cursor = self._cursor

        while is_alpha_numeric(cursor.peek()):
            cursor.advance()

        return self._make_token(keyword_type(cursor.lexeme, self.options.keywords))


# =============================================================================
# Convenience Function
# =============================================================================

def scan(
    source: str,
    options: Optional[ScannerOptions] = None,
    reporter: Optional[Reporter] = None,
) -> ScanResult:
    """
    Scan source text in one call.

    Args:
        source: Lox source code
        options: Scanner configuration (uses defaults if None)
        reporter: Called with (line, where, message) for every error

    Returns:
        ScanResult with the tokens and the errors found
    """
    scanner = Scanner(source, options, reporter)
    tokens = scanner.scan_tokens()
    return ScanResult(tuple(tokens), tuple(scanner.errors))
