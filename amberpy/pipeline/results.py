"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from amberpy.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticsRunResult:
    """Result of parsing one compiler invocation's output."""

    output: str
    diagnostics: list[Diagnostic]
    has_errors: bool


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of reindenting one source document."""

    source_text: str
    formatted_text: str
    changed: bool
