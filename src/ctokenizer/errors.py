"""
ctokenizer Error Hierarchy
==========================

This module defines the exception hierarchy for the ctokenizer package.
All exceptions inherit from TokenizerError, allowing callers to catch all
package-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
TokenizerError (base)
└── SourceReadError - the source text could not be read

Design Philosophy
-----------------
The scanner itself never raises: malformed comments and literals are
accepted leniently and unrecognized characters become UNKNOWN tokens.
The only failure a user can see is the surrounding program being unable
to acquire the source text, which is reported as:

    Error: could not open 'missing.c' for reading.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TokenizerError(Exception):
    """
    Base exception for all ctokenizer errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch all package errors with a single except clause:

        try:
            source = read_source(path)
        except TokenizerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Input Exceptions
# =============================================================================

class SourceReadError(TokenizerError):
    """
    The source file could not be opened.

    Attributes:
        path: The path that was requested (as given by the user)
        cause: The underlying OSError, if any
    """

    def __init__(self, path: str, cause: Optional[Exception] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"could not open '{path}' for reading.")
