"""
Source Cursor
=============

Position tracking over an immutable source buffer. The cursor knows where
the lexeme being scanned starts, which character comes next, and which line
that character sits on. It never reports errors.
"""

# Returned by peek()/peek_next() past the end of the buffer
NO_CHAR = ""


class Cursor:
    """
    Read position and line bookkeeping for one scan.

    Attributes:
        source: The text being scanned (never modified)
        start: Offset of the first character of the current lexeme
        current: Offset of the next unconsumed character
        line: Line of the next unconsumed character (1-indexed)
        start_line: Line on which the current lexeme started
    """

    def __init__(self, source: str, line: int = 1):
        self.source = source
        self.start = 0
        self.current = 0
        self.line = line
        self.start_line = line

        # Offset of the first character of the current line
        self._line_start = 0

    # =========================================================================
    # Character Access
    # =========================================================================

    def is_at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self.current >= len(self.source)

    def advance(self) -> str:
        """
        Consume and return the next character.

        Consuming a newline moves the cursor to the next line. Returns
        NO_CHAR without moving when already at the end.
        """
        if self.is_at_end():
            return NO_CHAR

        char = self.source[self.current]
        self.current += 1

        if char == "\n":
            self.line += 1
            self._line_start = self.current

        return char

    def peek(self) -> str:
        """Look at the next character without consuming it."""
        if self.is_at_end():
            return NO_CHAR
        return self.source[self.current]

    def peek_next(self) -> str:
        """Look one character past the next without consuming anything."""
        if self.current + 1 >= len(self.source):
            return NO_CHAR
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        """
        Consume the next character only if it equals expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.advance()
        return True

    # =========================================================================
    # Lexeme Bookkeeping
    # =========================================================================

    def mark(self) -> None:
        """Start a new lexeme at the current position."""
        self.start = self.current
        self.start_line = self.line

    @property
    def lexeme(self) -> str:
        """Text consumed since the last mark()."""
        return self.source[self.start:self.current]

    @property
    def column(self) -> int:
        """Column of the next unconsumed character (1-indexed)."""
        return self.current - self._line_start + 1

    def line_text(self) -> str:
        """Return the full text of the line the cursor is on."""
        line_end = self.source.find("\n", self._line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start:line_end]
