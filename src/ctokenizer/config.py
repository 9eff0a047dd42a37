"""
Report Configuration
====================

Settings for the token report and for reading source text. Configuration
can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the ctok CLI on top of the above)

Environment variables (all optional):
    CTOK_TOKEN_WIDTH: Width of the Token column (positive integer)
    CTOK_TYPE_WIDTH: Width of the Type column (positive integer)
    CTOK_LINE_WIDTH: Width of the Line column (positive integer)
    CTOK_ENCODING: Codec used to decode source bytes
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


# One character per input byte
DEFAULT_ENCODING = "latin-1"


@dataclass
class ReportConfig:
    """
    Configuration for the token report.

    Attributes:
        token_width: Minimum width of the Token column (default: 30)
        type_width: Minimum width of the Type column (default: 15)
        line_width: Minimum width of the Line column (default: 6)
        encoding: Codec for decoding source bytes (default: "latin-1")
    """

    token_width: int = 30
    type_width: int = 15
    line_width: int = 6
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReportConfig":
        """
        Create ReportConfig from environment variables.

        Invalid width values are ignored and the default is kept.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            ReportConfig with values from the environment
        """
        env = os.environ if environ is None else environ
        config = cls()

        if width := _positive_int(env.get("CTOK_TOKEN_WIDTH")):
            config.token_width = width

        if width := _positive_int(env.get("CTOK_TYPE_WIDTH")):
            config.type_width = width

        if width := _positive_int(env.get("CTOK_LINE_WIDTH")):
            config.line_width = width

        if encoding := env.get("CTOK_ENCODING"):
            config.encoding = encoding

        return config


def _positive_int(value: Optional[str]) -> Optional[int]:
    """Parse a positive integer, returning None for missing or bad values."""
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None
