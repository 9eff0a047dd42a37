"""
Literal Scanners
================

Leaf routines that extract character, string and numeric literals.

Each routine takes the full source, the cursor index and the current line
number, and returns a ScanResult holding the extracted lexeme together with
the updated cursor and line. None of them keep state between calls.

Escape sequences are captured verbatim: the lexeme of '\\n' is the four
characters quote, backslash, n, quote. No value conversion is done for
numbers either; tokens are purely textual.

Leniency
--------
The literal scanners never fail. A character or string literal that runs
into the end of the source is returned with whatever was consumed, without
a closing quote.
"""

import string
from dataclasses import dataclass


DIGITS = frozenset(string.digits)


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a literal scan.

    Attributes:
        lexeme: The consumed source text
        pos: Cursor index just past the lexeme
        line: Line number after any line feeds inside the lexeme
    """
    lexeme: str
    pos: int
    line: int


# =============================================================================
# Character Literals
# =============================================================================

def parse_char_literal(source: str, pos: int, line: int) -> ScanResult:
    """
    Scan a character literal starting at the opening single quote.

    Consumes the quote, then either a backslash plus the following
    character, or exactly one ordinary character (a line feed is accepted),
    then a closing quote if one is next.
    """
    n = len(source)
    start = pos
    pos += 1  # opening '

    if pos >= n:
        return ScanResult(source[start:pos], pos, line)

    if source[pos] == "\\":
        pos += 1
        if pos < n:
            if source[pos] == "\n":
                line += 1
            pos += 1
    else:
        if source[pos] == "\n":
            line += 1
        pos += 1

    if pos < n and source[pos] == "'":
        pos += 1

    return ScanResult(source[start:pos], pos, line)


# =============================================================================
# String Literals
# =============================================================================

def parse_string_literal(source: str, pos: int, line: int) -> ScanResult:
    """
    Scan a string literal starting at the opening double quote.

    Runs until the closing quote (inclusive) or the end of the source.
    A backslash and the character after it are taken as a pair, so an
    escaped quote does not end the literal. Line feeds inside the literal
    advance the line counter.
    """
    n = len(source)
    start = pos
    pos += 1  # opening "

    while pos < n:
        char = source[pos]
        pos += 1

        if char == "\\":
            if pos < n:
                if source[pos] == "\n":
                    line += 1
                pos += 1
            continue

        if char == '"':
            break

        if char == "\n":
            line += 1

    return ScanResult(source[start:pos], pos, line)


# =============================================================================
# Numeric Literals
# =============================================================================

def _skip_digits(source: str, pos: int) -> int:
    """Return the index of the first non-digit at or after pos."""
    n = len(source)
    while pos < n and source[pos] in DIGITS:
        pos += 1
    return pos


def parse_number(source: str, pos: int, line: int) -> ScanResult:
    """
    Scan a numeric literal.

    Grammar (longest match):
        digits? ('.' digits?)? ([eE] [+-]? digits)?

    Supports 123, 12.34, .45, 5., 1e10 and 1.2e-3. The exponent is consumed
    speculatively: if no digit follows the marker (and optional sign), the
    cursor is rolled back to just before the marker.

    The result may contain no digits at all (a lone "."); the caller
    decides whether that counts as a number.
    """
    n = len(source)
    start = pos

    # Integer part
    pos = _skip_digits(source, pos)

    # Fractional part
    if pos < n and source[pos] == ".":
        pos = _skip_digits(source, pos + 1)

    # Exponent part
    if pos < n and source[pos] in "eE":
        mark = pos
        exp = pos + 1
        if exp < n and source[exp] in "+-":
            exp += 1
        digits_end = _skip_digits(source, exp)
        pos = digits_end if digits_end > exp else mark

    return ScanResult(source[start:pos], pos, line)


def has_digit(lexeme: str) -> bool:
    """Return True if lexeme contains at least one decimal digit."""
    return any(char in DIGITS for char in lexeme)
