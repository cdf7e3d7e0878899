"""Command line front end: `amberpy <command>`."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
from pathlib import Path
import subprocess
import sys

from amberpy.compiler import compile_command
from amberpy.config import AmberConfig, ConfigError, UnlocatedPolicy, load_config
from amberpy.diagnostics import Diagnostic, diagnostic_to_dict, format_diagnostic
from amberpy.highlight import highlight_source
from amberpy.pipeline import run_diagnostics, run_format

logger = logging.getLogger("amberpy")

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_INFRA = 2


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))
    logger.setLevel(level)
    logger.handlers[:] = [handler]
    logger.propagate = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amberpy",
        description="Diagnostics, indentation and highlighting for Amber sources.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    diagnostics = subparsers.add_parser("diagnostics", help="Parse compiler output into diagnostics")
    diagnostics.add_argument("input", nargs="?", default="-", help="Compiler output file (default: stdin)")
    _add_diagnostic_flags(diagnostics)

    indent = subparsers.add_parser("indent", help="Reindent an Amber source file")
    indent.add_argument("path", type=Path)
    mode = indent.add_mutually_exclusive_group()
    mode.add_argument("--in-place", action="store_true", help="Rewrite the file instead of printing")
    mode.add_argument("--check", action="store_true", help="Exit 1 if the file would be reindented")
    indent.add_argument("--indent-unit", type=int, default=None, help="Columns per indentation level")

    highlight = subparsers.add_parser("highlight", help="Print syntax highlighted source")
    highlight.add_argument("path", type=Path)
    highlight.add_argument("--formatter", default="terminal", help="Pygments formatter name (default: terminal)")

    check = subparsers.add_parser("check", help="Compile a file and report its diagnostics")
    check.add_argument("path", type=Path)
    check.add_argument("--executable", default=None, help="Compiler executable (default: amber)")
    _add_diagnostic_flags(check)

    return parser


def _add_diagnostic_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=("text", "json"), default="text", dest="output_format")
    parser.add_argument(
        "--no-strip-ansi",
        action="store_false",
        dest="strip_ansi",
        default=None,
        help="Match lines without removing ANSI colour codes",
    )
    parser.add_argument(
        "--keep-unlocated",
        action="store_const",
        const=UnlocatedPolicy.KEEP,
        dest="unlocated",
        default=None,
        help="Report headers that never received a location",
    )


def _report(diagnostics: list[Diagnostic], output_format: str) -> int:
    if output_format == "json":
        print(json.dumps([diagnostic_to_dict(d) for d in diagnostics], indent=2))
    else:
        for diagnostic in diagnostics:
            print(format_diagnostic(diagnostic))
    return EXIT_FINDINGS if diagnostics else EXIT_OK


def _cmd_diagnostics(args: argparse.Namespace, config: AmberConfig) -> int:
    config = config.with_overrides(strip_ansi=args.strip_ansi, unlocated=args.unlocated)
    if args.input == "-":
        output = sys.stdin.read()
    else:
        output = Path(args.input).read_text(encoding="utf-8", errors="replace")
    result = run_diagnostics(output, config)
    logger.info("Found %d diagnostics", len(result.diagnostics))
    return _report(result.diagnostics, args.output_format)


def _cmd_indent(args: argparse.Namespace, config: AmberConfig) -> int:
    config = config.with_overrides(indent_unit=args.indent_unit)
    path: Path = args.path
    source = path.read_text(encoding="utf-8")
    result = run_format(source, config)

    if args.check:
        if result.changed:
            print(f"would reindent {path}")
            return EXIT_FINDINGS
        return EXIT_OK
    if args.in_place:
        if result.changed:
            path.write_text(result.formatted_text, encoding="utf-8")
            logger.info("Reindented %s", path)
        return EXIT_OK
    sys.stdout.write(result.formatted_text)
    return EXIT_OK


def _cmd_highlight(args: argparse.Namespace, config: AmberConfig) -> int:
    source = args.path.read_text(encoding="utf-8")
    sys.stdout.write(highlight_source(source, formatter=args.formatter))
    return EXIT_OK


def _cmd_check(args: argparse.Namespace, config: AmberConfig) -> int:
    config = config.with_overrides(
        executable=args.executable,
        strip_ansi=args.strip_ansi,
        unlocated=args.unlocated,
    )
    command = compile_command(args.path, config=config)
    logger.info("Running %s", " ".join(command))
    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError:
        logger.error("Compiler executable not found: %s", config.executable)
        return EXIT_INFRA

    result = run_diagnostics(completed.stdout, config)
    logger.info("Compiler exited with %d, %d diagnostics", completed.returncode, len(result.diagnostics))
    return _report(result.diagnostics, args.output_format)


_COMMANDS = {
    "diagnostics": _cmd_diagnostics,
    "indent": _cmd_indent,
    "highlight": _cmd_highlight,
    "check": _cmd_check,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config is not None else AmberConfig()
        return _COMMANDS[args.command](args, config)
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_INFRA
    except OSError as exc:
        logger.error("%s", exc)
        return EXIT_INFRA
    except UnicodeDecodeError as exc:
        logger.error("Input is not valid UTF-8: %s", exc)
        return EXIT_INFRA


if __name__ == "__main__":
    raise SystemExit(main())
