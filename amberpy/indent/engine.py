"""Heuristic indentation engine.

The scan walks backward over already indented lines and decides from the
first non-blank one. Only the first token of that line is inspected, so a
construct that opens and closes on one line (`if x { y }`) still indents
the following line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from amberpy.config import DEFAULT_INDENT_UNIT
from amberpy.indent.lines import CLOSING_BRACKETS, IndentLineKind, classify_indent_line
from amberpy.text import first_significant_char


@dataclass(frozen=True, slots=True)
class IndentLine:
    """A preceding line with its accepted indentation column."""

    text: str
    indent: int

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError("IndentLine indent cannot be negative")


@dataclass(frozen=True, slots=True)
class IndentContext:
    """Inputs to one indentation decision."""

    preceding_lines: Sequence[IndentLine]
    current_line_text: str
    indent_unit: int = DEFAULT_INDENT_UNIT


def compute_indent(
    preceding_lines: Sequence[IndentLine],
    current_line_text: str,
    indent_unit: int = DEFAULT_INDENT_UNIT,
) -> int:
    """Indentation column for the line following `preceding_lines`."""
    if indent_unit < 1:
        raise ValueError(f"indent_unit must be positive, got {indent_unit}")

    result = _base_indent(preceding_lines, indent_unit)
    if first_significant_char(current_line_text) in CLOSING_BRACKETS:
        result = max(0, result - indent_unit)
    return result


def compute_indent_for(context: IndentContext) -> int:
    return compute_indent(context.preceding_lines, context.current_line_text, context.indent_unit)


def _base_indent(preceding_lines: Sequence[IndentLine], indent_unit: int) -> int:
    for line in reversed(preceding_lines):
        match classify_indent_line(line.text):
            case IndentLineKind.OPENER:
                return line.indent + indent_unit
            case IndentLineKind.CLOSER | IndentLineKind.PLAIN:
                return line.indent
            case IndentLineKind.BLANK:
                continue
    return 0
