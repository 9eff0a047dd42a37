"""
C-like Lexer (Tokenizer)
========================

This module implements the scanner that converts source text of a C-like
language into a flat list of classified tokens.

The scanner makes a single left-to-right pass. At each cursor position the
dispatch rules are tried in a fixed order and the first one that applies
consumes at least one character and emits zero or one token:

    1. whitespace            (skipped, line feeds counted)
    2. // line comment       (skipped)
    3. /* block comment */   (skipped, line feeds counted)
    4. 'c' char literal
    5. "s" string literal
    6. identifier / keyword
    7. number                (tried; restores the cursor on non-match)
    8. operator              (longest match of 3, 2, 1 characters)
    9. delimiter
   10. unknown character     (catch-all)

The scanner never raises. Malformed comments and literals are accepted
leniently, and any character no rule recognizes becomes an UNKNOWN token,
so every input terminates with every non-blank, non-comment character
accounted for.

Example Usage
-------------
>>> from ctokenizer.lexer import tokenize
>>> for token in tokenize("int x = 10; // set x\\n"):
...     print(token)
Token(KEYWORD, 'int', 1)
Token(IDENTIFIER, 'x', 1)
Token(OPERATOR, '=', 1)
Token(NUMBER, '10', 1)
Token(DELIMITER, ';', 1)
"""

import logging
import string
from typing import Callable, Optional

from ctokenizer.literals import (
    DIGITS,
    has_digit,
    parse_char_literal,
    parse_number,
    parse_string_literal,
)
from ctokenizer.tokens import (
    Token,
    TokenType,
    is_delimiter,
    is_keyword,
    match_operator,
)


logger = logging.getLogger(__name__)


# (token or None, new cursor, new line) returned by a rule that applied
Step = tuple[Optional[Token], int, int]


class Lexer:
    """
    Tokenizes C-like source code.

    Usage:
        lexer = Lexer(source_text)
        tokens = lexer.tokenize()

    The lexer keeps no cursor state between calls: each call to tokenize()
    starts a fresh pass, and every rule receives the cursor and line as
    arguments and returns the updated values.

    Attributes:
        source: The source code being tokenized
    """

    # C "isspace" characters in the default locale
    WHITESPACE = frozenset(" \t\n\v\f\r")

    # Characters that can start an identifier
    IDENT_START = frozenset(string.ascii_letters + "_")

    # Characters that can continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

    def __init__(self, source: str):
        self.source = source
        self._rules: tuple[Callable[[int, int], Optional[Step]], ...] = (
            self._skip_whitespace,
            self._skip_line_comment,
            self._skip_block_comment,
            self._scan_char,
            self._scan_string,
            self._scan_identifier,
            self._scan_number,
            self._scan_operator,
            self._scan_delimiter,
            self._scan_unknown,
        )

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            The tokens in source order
        """
        tokens: list[Token] = []
        pos = 0
        line = 1
        n = len(self.source)

        while pos < n:
            for rule in self._rules:
                step = rule(pos, line)
                if step is not None:
                    break
            token, pos, line = step
            if token is not None:
                tokens.append(token)

        logger.debug(f"Scanned {len(tokens)} tokens over {line} lines")
        return tokens

    # =========================================================================
    # Character Access
    # =========================================================================

    def _peek(self, pos: int, offset: int = 0) -> str:
        """
        Return the character at pos + offset, or "" past the end.
        """
        index = pos + offset
        if index >= len(self.source):
            return ""
        return self.source[index]

    # =========================================================================
    # Whitespace and Comments
    # =========================================================================

    def _skip_whitespace(self, pos: int, line: int) -> Optional[Step]:
        char = self.source[pos]
        if char not in self.WHITESPACE:
            return None
        if char == "\n":
            line += 1
        return None, pos + 1, line

    def _skip_line_comment(self, pos: int, line: int) -> Optional[Step]:
        """Skip // up to, but not including, the next line feed."""
        if self.source[pos] != "/" or self._peek(pos, 1) != "/":
            return None
        end = self.source.find("\n", pos + 2)
        if end == -1:
            end = len(self.source)
        return None, end, line

    def _skip_block_comment(self, pos: int, line: int) -> Optional[Step]:
        """
        Skip /* ... */ including the closing marker.

        An unterminated comment swallows the rest of the source.
        """
        if self.source[pos] != "/" or self._peek(pos, 1) != "*":
            return None

        close = self.source.find("*/", pos + 2)
        if close == -1:
            logger.debug(f"Unterminated block comment opened on line {line}")
            end = len(self.source)
        else:
            end = close + 2

        line += self.source.count("\n", pos, end)
        return None, end, line

    # =========================================================================
    # Literals
    # =========================================================================

    def _scan_char(self, pos: int, line: int) -> Optional[Step]:
        if self.source[pos] != "'":
            return None
        result = parse_char_literal(self.source, pos, line)
        if not _is_closed_char(result.lexeme):
            logger.debug(f"Unterminated character literal on line {line}")
        token = Token(result.lexeme, TokenType.CHAR, line)
        return token, result.pos, result.line

    def _scan_string(self, pos: int, line: int) -> Optional[Step]:
        if self.source[pos] != '"':
            return None
        result = parse_string_literal(self.source, pos, line)
        if result.pos >= len(self.source) and not _is_closed_string(result.lexeme):
            logger.debug(f"Unterminated string literal on line {line}")
        token = Token(result.lexeme, TokenType.STRING, line)
        return token, result.pos, result.line

    # =========================================================================
    # Identifiers and Numbers
    # =========================================================================

    def _scan_identifier(self, pos: int, line: int) -> Optional[Step]:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter or underscore and can contain
        letters, digits, and underscores. Keywords are distinguished
        by checking against the keyword set.
        """
        if self.source[pos] not in self.IDENT_START:
            return None

        end = pos + 1
        n = len(self.source)
        while end < n and self.source[end] in self.IDENT_CHARS:
            end += 1

        name = self.source[pos:end]
        token_type = TokenType.KEYWORD if is_keyword(name) else TokenType.IDENTIFIER
        return Token(name, token_type, line), end, line

    def _scan_number(self, pos: int, line: int) -> Optional[Step]:
        """
        Try to scan a number.

        Applies to a digit, or a "." followed by a digit. Returns None when
        the scan yields no digits, so the remaining rules see the original
        cursor.
        """
        char = self.source[pos]
        starts_number = char in DIGITS or (
            char == "." and self._peek(pos, 1) in DIGITS
        )
        if not starts_number:
            return None

        result = parse_number(self.source, pos, line)
        if not result.lexeme or not has_digit(result.lexeme):
            return None
        return Token(result.lexeme, TokenType.NUMBER, line), result.pos, result.line

    # =========================================================================
    # Operators, Delimiters and Fallback
    # =========================================================================

    def _scan_operator(self, pos: int, line: int) -> Optional[Step]:
        op = match_operator(self.source, pos)
        if not op:
            return None
        return Token(op, TokenType.OPERATOR, line), pos + len(op), line

    def _scan_delimiter(self, pos: int, line: int) -> Optional[Step]:
        char = self.source[pos]
        if not is_delimiter(char):
            return None
        return Token(char, TokenType.DELIMITER, line), pos + 1, line

    def _scan_unknown(self, pos: int, line: int) -> Step:
        return Token(self.source[pos], TokenType.UNKNOWN, line), pos + 1, line


def _is_closed_char(lexeme: str) -> bool:
    """Return True if a char lexeme has its closing quote."""
    if lexeme[1:2] == "\\":
        return len(lexeme) == 4 and lexeme.endswith("'")
    return len(lexeme) == 3 and lexeme.endswith("'")


def _is_closed_string(lexeme: str) -> bool:
    """Return True if a string lexeme ends with an unescaped closing quote."""
    if len(lexeme) < 2 or not lexeme.endswith('"'):
        return False
    # Count the backslashes directly before the final quote
    backslashes = len(lexeme[1:-1]) - len(lexeme[1:-1].rstrip("\\"))
    return backslashes % 2 == 0


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """
    Tokenize C-like source text.

    Args:
        source: The complete source text

    Returns:
        The tokens in source order
    """
    return Lexer(source).tokenize()
