# =============================================================================
# test_report.py - Report and Configuration Tests
# =============================================================================
# Tests for the fixed-width token table and ReportConfig.
# =============================================================================

from ctokenizer.config import ReportConfig
from ctokenizer.lexer import tokenize
from ctokenizer.report import format_header, format_report, format_row
from ctokenizer.tokens import Token, TokenType


def expected_row(lexeme: str, kind: str, line: int) -> str:
    return f"{lexeme.ljust(30)} | {kind.ljust(15)} | {str(line).ljust(6)}"


# =============================================================================
# Table Formatting Tests
# =============================================================================

class TestFormatRow:
    """Test single-row formatting."""

    def test_default_widths(self):
        row = format_row(Token("int", TokenType.KEYWORD, 1))
        assert row == expected_row("int", "Keyword", 1)

    def test_type_display_names(self):
        """Rows use the display names of the token types."""
        names = {
            TokenType.KEYWORD: "Keyword",
            TokenType.IDENTIFIER: "Identifier",
            TokenType.NUMBER: "Number",
            TokenType.OPERATOR: "Operator",
            TokenType.DELIMITER: "Delimiter",
            TokenType.STRING: "String",
            TokenType.CHAR: "Char",
            TokenType.UNKNOWN: "Unknown",
        }
        for token_type, name in names.items():
            assert format_row(Token("x", token_type, 3)) == expected_row("x", name, 3)

    def test_long_lexeme_not_truncated(self):
        """A lexeme wider than the column is printed in full."""
        lexeme = '"' + "a" * 40 + '"'
        row = format_row(Token(lexeme, TokenType.STRING, 12))
        assert row == f"{lexeme} | {'String'.ljust(15)} | {'12'.ljust(6)}"

    def test_custom_widths(self):
        config = ReportConfig(token_width=5, type_width=8, line_width=3)
        row = format_row(Token("x", TokenType.IDENTIFIER, 2), config)
        assert row == "x     | Identifier | 2  "


class TestFormatReport:
    """Test the full report layout."""

    def test_header(self):
        header, rule = format_header(ReportConfig())
        assert header == f"{'Token'.ljust(30)} | {'Type'.ljust(15)} | {'Line'.ljust(6)}"
        assert rule == "-" * 30 + "-|" + "-" * 15 + "-|" + "-" * 6

    def test_report_layout(self):
        """Check lines, blank line, header, rule, then one row per token."""
        report = format_report(tokenize("int x;"))
        lines = report.split("\n")
        assert lines[0] == "✔ Tokens found"
        assert lines[1] == "✔ Type of token"
        assert lines[2] == ""
        assert lines[3].startswith("Token")
        assert lines[4].startswith("-----")
        assert lines[5] == expected_row("int", "Keyword", 1)
        assert lines[6] == expected_row("x", "Identifier", 1)
        assert lines[7] == expected_row(";", "Delimiter", 1)
        assert lines[8] == ""
        assert report.endswith("\n")

    def test_empty_token_list(self):
        """An empty input still prints the headings."""
        lines = format_report([]).rstrip("\n").split("\n")
        assert len(lines) == 5


# =============================================================================
# Configuration Tests
# =============================================================================

class TestReportConfig:
    """Test ReportConfig defaults and environment overrides."""

    def test_defaults(self):
        config = ReportConfig()
        assert (config.token_width, config.type_width, config.line_width) == (30, 15, 6)
        assert config.encoding == "latin-1"

    def test_from_env(self):
        config = ReportConfig.from_env({
            "CTOK_TOKEN_WIDTH": "20",
            "CTOK_TYPE_WIDTH": "12",
            "CTOK_LINE_WIDTH": "4",
            "CTOK_ENCODING": "latin-1",
        })
        assert config == ReportConfig(20, 12, 4, "latin-1")

    def test_from_env_ignores_bad_values(self):
        """Non-numeric and non-positive widths keep the defaults."""
        config = ReportConfig.from_env({
            "CTOK_TOKEN_WIDTH": "wide",
            "CTOK_TYPE_WIDTH": "0",
            "CTOK_LINE_WIDTH": "-3",
        })
        assert config == ReportConfig()

    def test_from_env_empty(self):
        assert ReportConfig.from_env({}) == ReportConfig()
