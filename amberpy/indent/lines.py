"""Classification of source lines for the indentation heuristic."""

from __future__ import annotations

from enum import StrEnum
import re
from typing import Final

OPENER_WORDS: Final[tuple[str, ...]] = ("fun", "if", "else", "for", "loop")
CLOSING_BRACKETS: Final[frozenset[str]] = frozenset("}])")

OPENER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:\{|(?:%s)\b)" % "|".join(OPENER_WORDS)
)
# `}` alone on its line, optionally followed by a line comment.
DANGLING_CLOSER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*\}\s*(?://.*)?$")


class IndentLineKind(StrEnum):
    """Role of a preceding line in the backward indentation scan."""

    OPENER = "opener"
    CLOSER = "closer"
    PLAIN = "plain"
    BLANK = "blank"


def classify_indent_line(text: str) -> IndentLineKind:
    if not text.strip():
        return IndentLineKind.BLANK
    if OPENER_PATTERN.match(text):
        return IndentLineKind.OPENER
    if DANGLING_CLOSER_PATTERN.match(text):
        return IndentLineKind.CLOSER
    return IndentLineKind.PLAIN
