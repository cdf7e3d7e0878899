"""Classification of compiler output lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import re
from typing import Final

HEADER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*ERROR\s+(?P<message>.*)$")
LOCATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*at (?P<file>[^:]+):(?P<line>[0-9]{1,18}):(?P<column>[0-9]{1,18})\s*$"
)


class LineKind(StrEnum):
    """Role of one physical line in compiler output."""

    HEADER = "header"
    LOCATION = "location"
    CONTEXT = "context"
    BLANK = "blank"


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    kind: LineKind
    text: str
    message: str = ""
    file: str = ""
    line: int = 0
    column: int = 0


def classify_output_line(text: str) -> ClassifiedLine:
    """Classify one line (already stripped of colour codes and terminator).

    A location-shaped line whose line or column is zero, or longer than 18
    digits, is not a location; positions are 1-based.
    """
    header = HEADER_PATTERN.match(text)
    if header is not None:
        return ClassifiedLine(LineKind.HEADER, text, message=header.group("message").rstrip())

    location = LOCATION_PATTERN.match(text)
    if location is not None:
        line = int(location.group("line"))
        column = int(location.group("column"))
        if line > 0 and column > 0:
            return ClassifiedLine(
                LineKind.LOCATION,
                text,
                file=location.group("file"),
                line=line,
                column=column,
            )

    if not text.strip():
        return ClassifiedLine(LineKind.BLANK, text)
    return ClassifiedLine(LineKind.CONTEXT, text)
