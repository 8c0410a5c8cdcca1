# =============================================================================
# test_cursor.py - Cursor Unit Tests
# =============================================================================
# Tests for position and line tracking over a source buffer.
# =============================================================================

from lox_scanner.cursor import Cursor, NO_CHAR


class TestCharacterAccess:
    """Test advance/peek/match."""

    def test_advance_returns_characters_in_order(self):
        cursor = Cursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.is_at_end()

    def test_advance_at_end_does_not_move(self):
        cursor = Cursor("")
        assert cursor.is_at_end()
        assert cursor.advance() == NO_CHAR
        assert cursor.current == 0

    def test_peek_does_not_consume(self):
        cursor = Cursor("xy")
        assert cursor.peek() == "x"
        assert cursor.peek() == "x"
        assert cursor.peek_next() == "y"
        assert cursor.current == 0

    def test_peek_past_end(self):
        cursor = Cursor("x")
        assert cursor.peek_next() == NO_CHAR
        cursor.advance()
        assert cursor.peek() == NO_CHAR
        assert cursor.peek_next() == NO_CHAR

    def test_match_consumes_on_hit(self):
        cursor = Cursor("=>")
        assert cursor.match("=")
        assert cursor.current == 1

    def test_match_leaves_position_on_miss(self):
        cursor = Cursor("=>")
        assert not cursor.match(">")
        assert cursor.current == 0

    def test_match_at_end(self):
        cursor = Cursor("")
        assert not cursor.match("=")


class TestLineTracking:
    """Test line and column bookkeeping."""

    def test_newline_increments_line(self):
        cursor = Cursor("a\nb")
        cursor.advance()
        assert cursor.line == 1
        cursor.advance()
        assert cursor.line == 2

    def test_peek_does_not_count_newlines(self):
        cursor = Cursor("\n")
        cursor.peek()
        assert cursor.line == 1

    def test_matched_newline_counts(self):
        cursor = Cursor("\n")
        assert cursor.match("\n")
        assert cursor.line == 2

    def test_starting_line(self):
        cursor = Cursor("a\n", line=5)
        cursor.advance()
        cursor.advance()
        assert cursor.line == 6

    def test_column(self):
        cursor = Cursor("ab\ncd")
        assert cursor.column == 1
        cursor.advance()
        cursor.advance()
        assert cursor.column == 3
        cursor.advance()  # newline
        assert cursor.column == 1
        cursor.advance()
        assert cursor.column == 2

    def test_line_text(self):
        cursor = Cursor("first\nsecond\nthird")
        assert cursor.line_text() == "first"
        for _ in range(8):
            cursor.advance()
        assert cursor.line_text() == "second"


class TestLexemeBookkeeping:
    """Test mark() and the lexeme property."""

    def test_lexeme_since_mark(self):
        cursor = Cursor("var x")
        cursor.mark()
        for _ in range(3):
            cursor.advance()
        assert cursor.lexeme == "var"
        cursor.advance()
        cursor.mark()
        cursor.advance()
        assert cursor.lexeme == "x"

    def test_mark_records_start_line(self):
        cursor = Cursor("a\nb")
        cursor.advance()
        cursor.advance()
        cursor.mark()
        assert cursor.start == 2
        assert cursor.start_line == 2

    def test_start_line_survives_newlines(self):
        cursor = Cursor('"a\nb"')
        cursor.mark()
        while not cursor.is_at_end():
            cursor.advance()
        assert cursor.start_line == 1
        assert cursor.line == 2
