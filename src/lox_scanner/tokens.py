"""
Lox Tokens
==========

Token types, the reserved-word table and the Token record produced by the
scanner.

Token Categories
----------------
- Punctuation: ( ) { } , . - + ; / *
- Operators: ! != = == > >= < <=
- Literals: identifiers, "strings", numbers
- Keywords: and, class, else, false, for, fun, if, nil, or, print,
  return, super, this, true, var, while
- EOF: end-of-input sentinel, always the last token of a scan
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Union


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical categories of the Lox language."""

    # === Single-character tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or two character tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

# Exact, case-sensitive spellings. Read-only: item assignment raises TypeError.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

KEYWORD_TYPES: frozenset = frozenset(KEYWORDS.values())


def keyword_type(text: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> TokenType:
    """Return the reserved-word type for text, or IDENTIFIER."""
    return keywords.get(text, TokenType.IDENTIFIER)


# =============================================================================
# Token Data Class
# =============================================================================

Literal = Union[float, str, None]


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        lexeme: Exact source text of the token ("" for EOF)
        literal: Decoded value for NUMBER (float) and STRING (str), else None
        line: Line of the token's first character (1-indexed)
    """
    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __str__(self) -> str:
        """Format as 'TYPE lexeme literal', the token dump format."""
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORD_TYPES


def eof_token(line: int) -> Token:
    """Build the end-of-input sentinel for the given line."""
    return Token(TokenType.EOF, "", None, line)
