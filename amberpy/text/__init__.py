"""Shared line-scanning utilities."""

from amberpy.text.text import (
    ANSI_SGR_PATTERN,
    LINE_BREAK_PATTERN,
    SourceLine,
    first_significant_char,
    indentation_width,
    split_lines,
    strip_ansi,
)

__all__ = [
    "ANSI_SGR_PATTERN",
    "LINE_BREAK_PATTERN",
    "SourceLine",
    "first_significant_char",
    "indentation_width",
    "split_lines",
    "strip_ansi",
]
