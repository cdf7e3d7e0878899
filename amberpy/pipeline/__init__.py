"""Run result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from amberpy.pipeline.results import DiagnosticsRunResult, FormatRunResult

if TYPE_CHECKING:
    from amberpy.config import AmberConfig


def run_diagnostics(output: str, config: AmberConfig | None = None) -> DiagnosticsRunResult:
    from amberpy.pipeline.entrypoints import run_diagnostics as _run_diagnostics

    return _run_diagnostics(output, config)


def run_format(text: str, config: AmberConfig | None = None) -> FormatRunResult:
    from amberpy.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, config)


__all__ = [
    "DiagnosticsRunResult",
    "FormatRunResult",
    "run_diagnostics",
    "run_format",
]
