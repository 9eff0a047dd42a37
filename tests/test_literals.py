# =============================================================================
# test_literals.py - Literal Scanner Unit Tests
# =============================================================================
# Tests for the leaf scanners in ctokenizer.literals. Each scanner is called
# directly with (source, pos, line) and must return the lexeme together with
# the new cursor and line, without touching anything else.
# =============================================================================

import dataclasses

import pytest
from ctokenizer.literals import (
    ScanResult,
    has_digit,
    parse_char_literal,
    parse_number,
    parse_string_literal,
)


# =============================================================================
# ScanResult Tests
# =============================================================================

class TestScanResult:
    """Test the value returned by every scanner."""

    def test_is_immutable(self):
        """ScanResult is frozen."""
        result = ScanResult("1", 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.pos = 5


# =============================================================================
# Numeric Literal Tests
# =============================================================================

class TestParseNumber:
    """Test parse_number."""

    @pytest.mark.parametrize("source,lexeme", [
        ("123", "123"),
        ("12.34", "12.34"),
        (".45", ".45"),
        ("7.", "7."),
        ("1e10", "1e10"),
        ("1.2e-3", "1.2e-3"),
        ("9E+2", "9E+2"),
    ])
    def test_whole_input(self, source, lexeme):
        """The longest numeric prefix is consumed."""
        assert parse_number(source, 0, 1) == ScanResult(lexeme, len(lexeme), 1)

    def test_starts_mid_source(self):
        """Scanning starts at the given cursor."""
        assert parse_number("x=12.5e3;", 2, 4) == ScanResult("12.5e3", 8, 4)

    def test_exponent_rollback_with_sign(self):
        """Marker and sign are left for the caller when no digit follows."""
        assert parse_number("1e+z", 0, 1) == ScanResult("1", 1, 1)

    def test_exponent_rollback_at_end(self):
        assert parse_number("1e-", 0, 1) == ScanResult("1", 1, 1)

    def test_exponent_rollback_bare_marker(self):
        assert parse_number("3.5E", 0, 1) == ScanResult("3.5", 3, 1)

    def test_lone_dot(self):
        """A lone dot is returned without digits for the caller to reject."""
        result = parse_number(".", 0, 1)
        assert result == ScanResult(".", 1, 1)
        assert not has_digit(result.lexeme)

    def test_line_is_unchanged(self):
        """Numbers never contain line feeds."""
        assert parse_number("42\n", 0, 7).line == 7


# =============================================================================
# String Literal Tests
# =============================================================================

class TestParseStringLiteral:
    """Test parse_string_literal."""

    def test_simple(self):
        assert parse_string_literal('"hi" x', 0, 1) == ScanResult('"hi"', 4, 1)

    def test_escaped_quote(self):
        """The escaped quote is kept and scanning continues."""
        source = '"a\\"b"'
        assert parse_string_literal(source, 0, 1) == ScanResult(source, len(source), 1)

    def test_counts_line_feeds(self):
        """Each embedded line feed advances the line."""
        assert parse_string_literal('"a\nb\nc"', 0, 3) == ScanResult('"a\nb\nc"', 7, 5)

    def test_counts_escaped_line_feed(self):
        source = '"a\\\nb"'
        assert parse_string_literal(source, 0, 1).line == 2

    def test_unterminated(self):
        """Running out of input returns what was consumed."""
        assert parse_string_literal('"abc', 0, 1) == ScanResult('"abc', 4, 1)

    def test_trailing_backslash(self):
        assert parse_string_literal('"\\', 0, 1) == ScanResult('"\\', 2, 1)

    def test_starts_mid_source(self):
        assert parse_string_literal('s="x";', 2, 1) == ScanResult('"x"', 5, 1)


# =============================================================================
# Character Literal Tests
# =============================================================================

class TestParseCharLiteral:
    """Test parse_char_literal."""

    def test_simple(self):
        assert parse_char_literal("'a';", 0, 1) == ScanResult("'a'", 3, 1)

    def test_escape_is_verbatim(self):
        """The escape payload is not interpreted."""
        assert parse_char_literal("'\\n'", 0, 1) == ScanResult("'\\n'", 4, 1)

    def test_escaped_quote(self):
        assert parse_char_literal("'\\''", 0, 1) == ScanResult("'\\''", 4, 1)

    def test_line_feed_payload(self):
        """A raw line feed is accepted and counted."""
        assert parse_char_literal("'\n'", 0, 1) == ScanResult("'\n'", 3, 2)

    def test_missing_closing_quote(self):
        """Only one character is consumed when no quote follows."""
        assert parse_char_literal("'ab'", 0, 1) == ScanResult("'a", 2, 1)

    def test_opening_quote_only(self):
        assert parse_char_literal("'", 0, 1) == ScanResult("'", 1, 1)

    def test_backslash_at_end(self):
        assert parse_char_literal("'\\", 0, 1) == ScanResult("'\\", 2, 1)

    def test_starts_mid_source(self):
        assert parse_char_literal("c = 'z'", 4, 9) == ScanResult("'z'", 7, 9)
