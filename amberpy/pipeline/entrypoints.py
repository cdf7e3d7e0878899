"""Unified entrypoints that resolve configuration once per run."""

from __future__ import annotations

from amberpy.compiler import parse_compiler_output
from amberpy.config import AmberConfig
from amberpy.diagnostics import has_errors
from amberpy.format import run_format as _run_format
from amberpy.pipeline.results import DiagnosticsRunResult, FormatRunResult


def run_diagnostics(output: str, config: AmberConfig | None = None) -> DiagnosticsRunResult:
    """Recover diagnostics from the combined output of one compiler run."""
    resolved = config if config is not None else AmberConfig()
    diagnostics = parse_compiler_output(
        output,
        strip_ansi=resolved.strip_ansi,
        unlocated=resolved.unlocated,
    )
    return DiagnosticsRunResult(
        output=output,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def run_format(text: str, config: AmberConfig | None = None) -> FormatRunResult:
    """Reindent one source document."""
    return _run_format(text, config)
