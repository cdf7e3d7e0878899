"""Diagnostics."""

from amberpy.diagnostics.diagnostic import Diagnostic, Severity
from amberpy.diagnostics.report import (
    collect_diagnostics,
    diagnostic_to_dict,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "collect_diagnostics",
    "diagnostic_to_dict",
    "format_diagnostic",
    "has_errors",
]
