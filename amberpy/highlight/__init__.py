"""Syntax highlighting tables and lexer."""

from amberpy.highlight.keywords import BUILTINS, CONSTANTS, KEYWORDS, TYPES
from amberpy.highlight.lexer import AmberLexer, highlight_source

__all__ = [
    "BUILTINS",
    "CONSTANTS",
    "KEYWORDS",
    "TYPES",
    "AmberLexer",
    "highlight_source",
]
