"""
Token Definitions
=================

Token types, the immutable Token record, and the fixed membership sets
used to classify lexemes.

Token Categories
----------------
- Keywords: int, float, if, while, class, namespace, ...
- Identifiers: variable and function names
- Numbers: 123, 12.34, .45, 1e10, 1.2e-3
- Operators: +, ==, <<=, &&, ...
- Delimiters: ; , ( ) { } [ ]
- Strings: "double quoted"
- Characters: 'single quoted'
- Unknown: any other single character (@, $, #, non-ASCII, ...)

The membership sets are read-only module constants. There is no way to
extend them at runtime.
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Lexical categories produced by the scanner.

    The enum value is the display name used in reports.
    """

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    OPERATOR = "Operator"
    DELIMITER = "Delimiter"
    STRING = "String"
    CHAR = "Char"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Membership Sets
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    # Types
    "int", "float", "double", "char", "long", "short", "bool", "void",
    # Control flow
    "if", "else", "for", "while", "do", "return", "switch", "case", "break",
    "continue",
    # Declarations
    "class", "struct", "public", "private", "protected",
    # Directives / namespaces
    "include", "namespace", "using",
})

DELIMITERS: frozenset[str] = frozenset(";,(){}[]")

OPERATORS: frozenset[str] = frozenset({
    # Three character
    "<<=", ">>=",
    # Two character
    "==", "!=", "<=", ">=", "++", "--", "+=", "-=", "*=", "/=", "%=",
    "<<", ">>", "&&", "||",
    # Single character
    "+", "-", "*", "/", "%", "=", "<", ">", "!", "&", "|", "^", "~",
})

# Window lengths tried by match_operator, longest first
OPERATOR_WINDOWS = (3, 2, 1)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from the source text.

    Attributes:
        lexeme: The exact source substring, including any quotes
        type: The TokenType classification
        line: Line number of the token's first character (1-indexed)
    """
    lexeme: str
    type: TokenType
    line: int

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"


# =============================================================================
# Classification Helpers
# =============================================================================

def is_keyword(text: str) -> bool:
    """Return True if text is exactly one of the reserved words."""
    return text in KEYWORDS


def is_operator(text: str) -> bool:
    """Return True if text is exactly one of the recognized operators."""
    return text in OPERATORS


def is_delimiter(char: str) -> bool:
    """Return True if char is a single delimiter character."""
    return len(char) == 1 and char in DELIMITERS


def match_operator(source: str, pos: int) -> str:
    """
    Find the longest operator starting at pos.

    Windows of 3, 2 and 1 characters are tried in that order. A window that
    would run past the end of the source is skipped rather than truncated.

    Returns:
        The matched operator text, or "" if no operator starts at pos
    """
    for width in OPERATOR_WINDOWS:
        end = pos + width
        if end > len(source):
            continue
        candidate = source[pos:end]
        if is_operator(candidate):
            return candidate
    return ""
