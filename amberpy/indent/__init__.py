"""Indentation engine."""

from amberpy.indent.engine import (
    IndentContext,
    IndentLine,
    compute_indent,
    compute_indent_for,
)
from amberpy.indent.lines import (
    CLOSING_BRACKETS,
    OPENER_WORDS,
    IndentLineKind,
    classify_indent_line,
)

__all__ = [
    "CLOSING_BRACKETS",
    "OPENER_WORDS",
    "IndentContext",
    "IndentLine",
    "IndentLineKind",
    "classify_indent_line",
    "compute_indent",
    "compute_indent_for",
]
