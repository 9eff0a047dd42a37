"""
ctokenizer - Lexical Analyzer for a C-like Language
===================================================

This package converts raw source text into a flat, ordered list of
classified tokens, each annotated with the line it starts on. It is meant
to feed a parser that expects a linear token stream.

Main Components
---------------
- **tokens**: TokenType, Token and the keyword/operator/delimiter sets
- **literals**: char, string and numeric literal scanners
- **lexer**: the scanner (Lexer, tokenize)
- **report**: fixed-width table output
- **cli**: the ctok command-line tool

Quick Start
-----------
    >>> from ctokenizer import tokenize
    >>> [(t.lexeme, t.type.value) for t in tokenize("x += .5;")]
    [('x', 'Identifier'), ('+=', 'Operator'), ('.5', 'Number'), (';', 'Delimiter')]

Or use the command-line tool:
    $ ctok hello.c
    $ ctok < hello.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from ctokenizer.config import ReportConfig
from ctokenizer.errors import SourceReadError, TokenizerError
from ctokenizer.lexer import Lexer, tokenize
from ctokenizer.literals import (
    ScanResult,
    parse_char_literal,
    parse_number,
    parse_string_literal,
)
from ctokenizer.report import format_report, format_row
from ctokenizer.tokens import (
    DELIMITERS,
    KEYWORDS,
    OPERATORS,
    Token,
    TokenType,
    is_delimiter,
    is_keyword,
    is_operator,
    match_operator,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Lexer",
    "tokenize",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "OPERATORS",
    "DELIMITERS",
    "is_keyword",
    "is_operator",
    "is_delimiter",
    "match_operator",
    # Literal scanners
    "ScanResult",
    "parse_char_literal",
    "parse_string_literal",
    "parse_number",
    # Report
    "ReportConfig",
    "format_report",
    "format_row",
    # Exception hierarchy
    "TokenizerError",
    "SourceReadError",
]
