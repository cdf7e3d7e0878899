"""Compiler output parsing and compile command wiring."""

from amberpy.compiler.command import compile_command
from amberpy.compiler.lines import (
    HEADER_PATTERN,
    LOCATION_PATTERN,
    ClassifiedLine,
    LineKind,
    classify_output_line,
)
from amberpy.compiler.parser import (
    OutputScanner,
    ScanState,
    iter_compiler_diagnostics,
    parse_compiler_lines,
    parse_compiler_output,
)

__all__ = [
    "HEADER_PATTERN",
    "LOCATION_PATTERN",
    "ClassifiedLine",
    "LineKind",
    "OutputScanner",
    "ScanState",
    "classify_output_line",
    "compile_command",
    "iter_compiler_diagnostics",
    "parse_compiler_lines",
    "parse_compiler_output",
]
