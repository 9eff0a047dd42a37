"""
ctokenizer Command-Line Interface
=================================

This package provides the command-line tool for the tokenizer:

- **ctok**: tokenize a C-like source file and print the token table

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["ctok"]
