"""Editor-agnostic tooling for the Amber scripting language."""

from amberpy.compiler import (
    OutputScanner,
    compile_command,
    parse_compiler_lines,
    parse_compiler_output,
)
from amberpy.config import AmberConfig, ConfigError, UnlocatedPolicy, load_config
from amberpy.diagnostics import Diagnostic, Severity
from amberpy.indent import IndentContext, IndentLine, compute_indent, compute_indent_for

__all__ = [
    "AmberConfig",
    "ConfigError",
    "Diagnostic",
    "IndentContext",
    "IndentLine",
    "OutputScanner",
    "Severity",
    "UnlocatedPolicy",
    "compile_command",
    "compute_indent",
    "compute_indent_for",
    "load_config",
    "parse_compiler_lines",
    "parse_compiler_output",
]
