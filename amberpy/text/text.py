import re
from dataclasses import dataclass
from typing import Final

ANSI_SGR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")
"""ANSI Select Graphic Rendition sequence (`ESC [ params m`)."""

LINE_BREAK_PATTERN: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
"""Physical line terminators; other Unicode separators stay inside a line."""


@dataclass(frozen=True, slots=True)
class SourceLine:
    """One physical line of text without its terminator.

    `number` is 1-based. `terminator` is the line break that ended the line
    in the original text (empty for a final unterminated line).
    """

    number: int
    text: str
    terminator: str = ""

    def __post_init__(self):
        if self.number < 1:
            raise ValueError("SourceLine number must be 1-based")

    @property
    def is_blank(self) -> bool:
        """Check if the line holds only whitespace."""
        return not self.text.strip()


def split_lines(text: str) -> list[SourceLine]:
    """Split text into physical lines, keeping their terminators aside.

    A trailing line break does not produce an extra empty line.
    """
    lines: list[SourceLine] = []
    start = 0
    for number, match in enumerate(LINE_BREAK_PATTERN.finditer(text), start=1):
        lines.append(SourceLine(number=number, text=text[start : match.start()], terminator=match.group()))
        start = match.end()
    if start < len(text):
        lines.append(SourceLine(number=len(lines) + 1, text=text[start:]))
    return lines


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR escape sequences. Idempotent."""
    if "\x1b" not in text:
        return text
    return ANSI_SGR_PATTERN.sub("", text)


def indentation_width(text: str, *, tab_width: int = 4) -> int:
    """Column of the first non-whitespace character, expanding tabs."""
    column = 0
    for ch in text:
        if ch == " ":
            column += 1
        elif ch == "\t":
            column += tab_width - (column % tab_width)
        else:
            break
    return column


def first_significant_char(text: str) -> str | None:
    """First non-whitespace character of a line, or None for blank lines."""
    stripped = text.lstrip()
    return stripped[0] if stripped else None
