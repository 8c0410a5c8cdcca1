# =============================================================================
# test_errors.py - Error Hierarchy and Collector Tests
# =============================================================================

import pytest

from lox_scanner.errors import (
    ErrorCollector,
    LexicalError,
    LoxError,
    ScannerStateError,
    SourceLocation,
    TooManyErrors,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
    format_report,
)
from lox_scanner.lexer import Scanner, ScannerOptions, scan


class TestHierarchy:
    """All package errors share LoxError as a base."""

    def test_lexical_errors(self):
        for cls in (UnexpectedCharacterError, UnterminatedStringError, UnterminatedCommentError):
            assert issubclass(cls, LexicalError)
            assert issubclass(cls, LoxError)

    def test_misuse_errors(self):
        assert issubclass(ScannerStateError, LoxError)
        assert issubclass(TooManyErrors, LoxError)


class TestFormatting:
    """Test error message rendering."""

    def test_source_location_str(self):
        assert str(SourceLocation("a.lox", 3, 7)) == "a.lox:3:7"

    def test_format_report(self):
        assert format_report(3, "", "Unexpected character.") == "[line 3] Error: Unexpected character."
        assert format_report(1, " at end", "Expect ';'.") == "[line 1] Error at end: Expect ';'."

    def test_report_line(self):
        error = UnterminatedStringError(SourceLocation("<input>", 4, 1))
        assert error.report_line() == "[line 4] Error: Unterminated string."

    def test_detailed_message_with_caret(self):
        error = UnexpectedCharacterError(
            "@",
            SourceLocation("t.lox", 2, 9),
            source_line="var a = @;",
        )
        lines = str(error).split("\n")
        assert lines[0] == "t.lox:2:9: error: Unexpected character."
        assert lines[1] == "    var a = @;"
        assert lines[2] == " " * 12 + "^"
        assert lines[3].startswith("hint: '@' (U+0040)")

    def test_message_without_source_line(self):
        error = LexicalError("Something odd.", SourceLocation("<input>", 1, 1))
        assert str(error) == "<input>:1:1: error: Something odd."

    def test_scanner_error_message(self):
        result = scan('print "oops', ScannerOptions(filename="s.lox"))
        text = str(result.errors[0])
        assert text.startswith("s.lox:1:12: error: Unterminated string.")
        assert "    print \"oops" in text


class TestErrorCollector:
    """Test the collecting diagnostic sink."""

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0
        assert collector.report() == "0 errors"

    def test_reporter_interface(self):
        collector = ErrorCollector()
        collector(2, "", "Unexpected character.")
        assert collector.has_errors()
        assert collector.reports == [(2, "", "Unexpected character.")]
        assert collector.report() == "[line 2] Error: Unexpected character.\n1 error"

    def test_add_error_objects(self):
        collector = ErrorCollector()
        for error in scan("@ @").errors:
            collector.add(error)
        assert collector.error_count() == 2
        report = collector.report()
        assert report.count("error: Unexpected character.") == 2
        assert report.endswith("2 errors")

    def test_mixed_inputs_keep_every_diagnostic(self):
        """Triples from the Reporter interface and added objects are all listed."""
        collector = ErrorCollector()
        Scanner("@", reporter=collector).scan_tokens()
        for error in scan("#").errors:
            collector.add(error)
        report = collector.report()
        lines = report.split("\n")
        assert lines[0] == "[line 1] Error: Unexpected character."
        assert lines[1] == "<input>:1:1: error: Unexpected character."
        assert "    #" in lines
        assert report.count("Unexpected character.") == 2
        assert report.endswith("2 errors")

    def test_max_errors(self):
        collector = ErrorCollector(max_errors=2)
        collector(1, "", "first")
        with pytest.raises(TooManyErrors) as exc_info:
            collector(1, "", "second")
        assert exc_info.value.limit == 2

    def test_limit_stops_scanner(self):
        """A collector limit propagates out of the scan."""
        collector = ErrorCollector(max_errors=3)
        scanner = Scanner("@@@@@", reporter=collector)
        with pytest.raises(TooManyErrors):
            scanner.scan_tokens()
        assert len(scanner.errors) == 3

    def test_clear(self):
        collector = ErrorCollector()
        collector(1, "", "x")
        collector.clear()
        assert not collector.has_errors()
