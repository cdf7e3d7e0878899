"""Pygments lexer for Amber sources."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import get_formatter_by_name
from pygments.lexer import RegexLexer, bygroups, include, words
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Whitespace,
)

from amberpy.highlight.keywords import BUILTINS, CONSTANTS, KEYWORDS, TYPES


class AmberLexer(RegexLexer):
    """Lexer for Amber, the language that compiles to shell scripts."""

    name = "Amber"
    aliases = ["amber", "ab"]
    filenames = ["*.ab"]
    mimetypes = ["text/x-amber"]

    tokens = {
        "root": [
            (r"\s+", Whitespace),
            (r"//.*?$", Comment.Single),
            (r'"', String.Double, "string"),
            (r"\$", String.Backtick, "command"),
            (r"(fun)(\s+)([A-Za-z_]\w*)", bygroups(Keyword.Declaration, Whitespace, Name.Function)),
            (words(KEYWORDS, prefix=r"\b", suffix=r"\b"), Keyword),
            (words(TYPES, prefix=r"\b", suffix=r"\b"), Keyword.Type),
            (words(CONSTANTS, prefix=r"\b", suffix=r"\b"), Keyword.Constant),
            (words(BUILTINS, prefix=r"\b", suffix=r"\b"), Name.Builtin),
            (r"\d+\.\d+", Number.Float),
            (r"\d+", Number.Integer),
            (r"[A-Za-z_]\w*", Name),
            (r"==|!=|<=|>=|\+=|-=|\*=|/=|%=|\.\.=?|[+\-*/%<>=!?]", Operator),
            (r"[{}()\[\],:;.]", Punctuation),
        ],
        "string": [
            (r"\\.", String.Escape),
            (r"\{", String.Interpol, "interpolation"),
            (r'"', String.Double, "#pop"),
            (r'[^"\\{]+', String.Double),
        ],
        "command": [
            (r"\\.", String.Escape),
            (r"\{", String.Interpol, "interpolation"),
            (r"\$", String.Backtick, "#pop"),
            (r"[^$\\{]+", String.Backtick),
        ],
        "interpolation": [
            (r"\}", String.Interpol, "#pop"),
            include("root"),
        ],
    }


def highlight_source(text: str, formatter: str = "terminal", **options) -> str:
    """Render Amber source through a named Pygments formatter."""
    return highlight(text, AmberLexer(), get_formatter_by_name(formatter, **options))
