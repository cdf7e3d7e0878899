"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic recovered from compiler output.

    `line` and `column` are 1-based. An unlocated diagnostic (header seen,
    location never found) has `file=None` and zero line/column.
    """

    message: str
    file: str | None
    line: int
    column: int
    severity: Severity = "error"

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("Diagnostic line/column cannot be negative")
        if self.file is not None and (self.line == 0 or self.column == 0):
            raise ValueError("Located diagnostic needs 1-based line and column")

    @staticmethod
    def unlocated(message: str, severity: Severity = "error") -> "Diagnostic":
        """Create a Diagnostic that never received a location."""
        return Diagnostic(message=message, file=None, line=0, column=0, severity=severity)

    @property
    def is_located(self) -> bool:
        return self.file is not None

    @property
    def summary(self) -> str:
        """First line of the message."""
        return self.message.split("\n", 1)[0]

    def location(self) -> str:
        """`file:line:column`, or `<unknown>` for unlocated diagnostics."""
        if self.file is None:
            return "<unknown>"
        return f"{self.file}:{self.line}:{self.column}"
