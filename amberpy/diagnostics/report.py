"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from amberpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as `file:line:column: severity: message`.

    Continuation lines of a multi-line message are indented by two spaces.
    """
    head, *rest = diagnostic.message.split("\n")
    rendered = f"{diagnostic.location()}: {diagnostic.severity}: {head}"
    if rest:
        rendered += "".join(f"\n  {line}" for line in rest)
    return rendered


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    """Plain-data view used for JSON output."""
    return {
        "severity": diagnostic.severity,
        "message": diagnostic.message,
        "file": diagnostic.file,
        "line": diagnostic.line,
        "column": diagnostic.column,
    }
