"""
Field-level helpers for the CSV column loader.

Lines are split on the literal comma with no quoting and no trimming.
A field is numeric when it is an ASCII integer or decimal literal with an
optional exponent; surrounding whitespace is ignored.
"""

from __future__ import annotations

import math
import re

DELIMITER = ','

_NUMBER = re.compile(
    r"""
    \s*
    [+-]?
    (?: \d+ (?:\.\d*)? | \.\d+ )     # 12, 12., 12.5, .5
    (?: [eE] [+-]? \d+ )?            # exponent
    \s*
    """,
    re.VERBOSE | re.ASCII,
)


def split_fields(line: str) -> list[str]:
    """Split one record on commas. Empty fields are kept."""
    return line.split(DELIMITER)


def strip_terminator(line: str) -> str:
    """Drop the trailing newline, and only the newline."""
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n') or line.endswith('\r'):
        return line[:-1]
    return line


def parse_number(text: str) -> float:
    """
    Parse a numeric field.

    Raises:
        ValueError: If text is not an integer or decimal literal, or its
            value overflows double precision.
    """
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"not a numeric literal: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"numeric literal out of range: {text!r}")
    return value
