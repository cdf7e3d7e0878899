"""Keyword tables for the Amber language."""

from typing import Final

KEYWORDS: Final[tuple[str, ...]] = (
    "and",
    "as",
    "break",
    "const",
    "continue",
    "else",
    "exited",
    "fail",
    "failed",
    "for",
    "from",
    "fun",
    "if",
    "import",
    "in",
    "is",
    "let",
    "loop",
    "main",
    "nameof",
    "not",
    "or",
    "pub",
    "ref",
    "return",
    "silent",
    "status",
    "succeeded",
    "then",
    "trust",
    "unsafe",
)

BUILTINS: Final[tuple[str, ...]] = (
    "cd",
    "echo",
    "exit",
    "len",
    "lines",
    "mv",
)

TYPES: Final[tuple[str, ...]] = (
    "Bool",
    "Int",
    "Null",
    "Num",
    "Text",
)

CONSTANTS: Final[tuple[str, ...]] = (
    "false",
    "null",
    "true",
)
