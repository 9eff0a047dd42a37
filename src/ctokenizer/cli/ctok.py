"""
ctok - Tokenizer Command-Line Interface
=======================================

This module implements the command-line interface for the tokenizer. It
reads a complete source text, scans it, and prints the token table.

Usage Examples
--------------
Tokenize a file:
    $ ctok hello.c

Read from standard input:
    $ ctok < hello.c
    $ cat hello.c | ctok -

Write the table to a file:
    $ ctok hello.c -o hello.tokens

Verbose mode:
    $ ctok -v hello.c
"""

import codecs
import logging
from pathlib import Path
from typing import Optional

import click

from ctokenizer import __version__
from ctokenizer.cli.errors import handle_cli_exception
from ctokenizer.config import DEFAULT_ENCODING, ReportConfig
from ctokenizer.errors import SourceReadError
from ctokenizer.lexer import tokenize
from ctokenizer.report import format_report


logger = logging.getLogger(__name__)

STDIN_SENTINEL = "-"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def decode_source(data: bytes, encoding: str) -> str:
    """
    Decode raw source bytes without newline translation.

    Bytes the codec cannot decode become U+FFFD and scan as UNKNOWN
    tokens. With the default latin-1 codec every byte maps to exactly
    one character.
    """
    return data.decode(encoding, errors="replace")


def read_source(source: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the complete source text.

    Files and standard input are both read as bytes and decoded the same
    way, so line endings reach the scanner unchanged.

    Args:
        source: A file path, or "-" for standard input
        encoding: Codec used to decode the bytes

    Returns:
        The full source text

    Raises:
        SourceReadError: If the file cannot be opened
    """
    if source == STDIN_SENTINEL:
        data = click.get_binary_stream("stdin").read()
        logger.debug(f"Read {len(data)} bytes from standard input")
        return decode_source(data, encoding)

    try:
        data = Path(source).read_bytes()
    except OSError as e:
        raise SourceReadError(source, e) from e

    logger.debug(f"Read {len(data)} bytes from {source}")
    return decode_source(data, encoding)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source",
    required=False,
    default=STDIN_SENTINEL,
    type=click.Path(dir_okay=False, allow_dash=True),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the token table to a file (default: stdout)",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Encoding of the source file (default: latin-1, or $CTOK_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="ctok")
def main(
    source: str,
    output: Optional[Path],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize C-like source code and print a table of tokens.

    SOURCE is the file to tokenize. Use "-" or omit it to read standard
    input.

    \b
    Examples:
        ctok hello.c                 # Print the token table
        ctok < hello.c               # Read from standard input
        ctok hello.c -o out.txt      # Write the table to a file
    """
    setup_logging(verbose)

    config = ReportConfig.from_env()
    if encoding:
        config.encoding = encoding

    try:
        try:
            codecs.lookup(config.encoding)
        except LookupError:
            raise click.BadParameter(
                f"unknown encoding '{config.encoding}'",
                param_hint="--encoding",
            )

        text = read_source(source, config.encoding)
        tokens = tokenize(text)
        report = format_report(tokens, config)

        if output is not None:
            output.write_text(report, encoding="utf-8")
        else:
            click.echo(report, nl=False)

        if verbose:
            last_line = tokens[-1].line if tokens else 0
            click.echo(f"Tokenized {len(tokens)} tokens (last on line {last_line})", err=True)
            if output is not None:
                click.echo(f"Wrote {len(report)} characters to {output}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
