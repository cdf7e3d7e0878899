"""Reindent runner over a whole source document."""

from __future__ import annotations

import logging

from amberpy.config import AmberConfig
from amberpy.indent import IndentLine, compute_indent
from amberpy.pipeline.results import FormatRunResult
from amberpy.text import indentation_width, split_lines

logger = logging.getLogger(__name__)


def run_format(text: str, config: AmberConfig | None = None) -> FormatRunResult:
    """Reindent every line top to bottom.

    Each line is indented from the already reindented lines above it, the
    way a host applies the engine line by line. Blank lines are emptied and
    line terminators are kept.
    """
    resolved = config if config is not None else AmberConfig()
    accepted: list[IndentLine] = []
    parts: list[str] = []

    for line in split_lines(text):
        body = line.text.lstrip(" \t")
        if not body.strip():
            accepted.append(IndentLine(text="", indent=0))
            parts.append(line.terminator)
            continue
        indent = compute_indent(accepted, body, resolved.indent_unit)
        reindented = " " * indent + body
        accepted.append(IndentLine(text=reindented, indent=indent))
        parts.append(reindented + line.terminator)

    formatted_text = "".join(parts)
    changed = formatted_text != text
    logger.debug("Reindented %d lines (changed=%s)", len(accepted), changed)
    return FormatRunResult(source_text=text, formatted_text=formatted_text, changed=changed)


def indent_line(text: str, line_index: int, config: AmberConfig | None = None) -> int:
    """Indentation column for line `line_index` (0-based) of `text`.

    Preceding lines keep their current indentation; this is the single-line
    request a host makes when the user indents one line.
    """
    resolved = config if config is not None else AmberConfig()
    lines = split_lines(text)
    if line_index < 0:
        raise IndexError(f"line_index cannot be negative, got {line_index}")

    preceding = [
        IndentLine(text=line.text, indent=indentation_width(line.text, tab_width=resolved.indent_unit))
        for line in lines[:line_index]
    ]
    current = lines[line_index].text if line_index < len(lines) else ""
    return compute_indent(preceding, current, resolved.indent_unit)
