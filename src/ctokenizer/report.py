"""
Token Report
============

Renders a token list as the fixed-width console table:

    ✔ Tokens found
    ✔ Type of token

    Token                          | Type            | Line
    -------------------------------|----------------|-------
    int                            | Keyword         | 1

Lexemes wider than their column are printed in full; the columns after
them shift right rather than truncating the token.
"""

from typing import Iterable, Optional

from ctokenizer.config import ReportConfig
from ctokenizer.tokens import Token


CHECK_LINES = (
    "✔ Tokens found",
    "✔ Type of token",
)


def format_header(config: ReportConfig) -> list[str]:
    """Return the column header line and the rule beneath it."""
    header = (
        f"{'Token':<{config.token_width}} | "
        f"{'Type':<{config.type_width}} | "
        f"{'Line':<{config.line_width}}"
    )
    rule = (
        "-" * config.token_width + "-|"
        + "-" * config.type_width + "-|"
        + "-" * config.line_width
    )
    return [header, rule]


def format_row(token: Token, config: Optional[ReportConfig] = None) -> str:
    """Format a single token as one table row."""
    config = config or ReportConfig()
    return (
        f"{token.lexeme:<{config.token_width}} | "
        f"{token.type.value:<{config.type_width}} | "
        f"{token.line:<{config.line_width}}"
    )


def format_report(
    tokens: Iterable[Token],
    config: Optional[ReportConfig] = None,
) -> str:
    """
    Render the full report.

    Args:
        tokens: Tokens in source order
        config: Column widths (default: ReportConfig())

    Returns:
        The report text, ending with a newline
    """
    config = config or ReportConfig()

    lines = list(CHECK_LINES)
    lines.append("")
    lines.extend(format_header(config))
    lines.extend(format_row(token, config) for token in tokens)

    return "\n".join(lines) + "\n"
