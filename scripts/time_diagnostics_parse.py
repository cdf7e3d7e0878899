#!/usr/bin/env python3
"""Quick perf benchmark for compiler-output diagnostics parsing.

Compares one-shot parsing of whole outputs with line streaming through
`OutputScanner`, with and without ANSI stripping.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
import io
from pathlib import Path
import statistics
import time
from typing import TypeAlias

from tqdm import tqdm

from amberpy.compiler import parse_compiler_lines, parse_compiler_output

_SAMPLE_BLOCK = (
    "\x1b[31m ERROR\x1b[0m Variable 'count' does not exist\n"
    "  12| echo count + 1\n"
    "at src/main.ab:12:6\n"
    "\n"
    "ERROR Function 'greet' expects 1 argument\n"
    "at src/lib/util.ab:3:1\n"
    "Compilation failed\n"
)

ParseStrategy: TypeAlias = Callable[[str, bool], int]


def _one_shot(output: str, strip_ansi: bool) -> int:
    return len(parse_compiler_output(output, strip_ansi=strip_ansi))


def _streamed(output: str, strip_ansi: bool) -> int:
    return len(parse_compiler_lines(io.StringIO(output), strip_ansi=strip_ansi))


STRATEGIES: dict[str, ParseStrategy] = {
    "one-shot": _one_shot,
    "streamed": _streamed,
}


def _load_outputs(args: argparse.Namespace) -> tuple[str, list[str]]:
    if args.output_root is None:
        label = f"synthetic ({args.synthetic_count} x {args.synthetic_blocks} blocks)"
        return label, [_SAMPLE_BLOCK * args.synthetic_blocks] * args.synthetic_count

    root: Path = args.output_root
    if not root.is_dir():
        raise SystemExit(f"Invalid --output-root: {root}")
    files = sorted(path for path in [*root.rglob("*.log"), *root.rglob("*.txt")] if path.is_file())
    if not files:
        raise SystemExit(f"No .log/.txt files found under {root}")
    return str(root), [path.read_text(encoding="utf-8", errors="replace") for path in files]


def _time_strategy(
    strategy: ParseStrategy,
    outputs: list[str],
    *,
    strip_ansi: bool,
    runs: int,
    label: str,
    show_progress: bool,
) -> tuple[list[float], int]:
    timings: list[float] = []
    diagnostics = 0
    for _ in range(runs):
        iterator = tqdm(outputs, desc=label, unit="output", leave=False) if show_progress else outputs
        start = time.perf_counter()
        diagnostics = sum(strategy(output, strip_ansi) for output in iterator)
        timings.append(time.perf_counter() - start)
    return timings, diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark compiler-output parsing throughput")
    parser.add_argument(
        "--output-root",
        type=Path,
        default=None,
        help="Directory of captured compiler output (*.log, *.txt); synthetic output if omitted",
    )
    parser.add_argument("--synthetic-count", type=int, default=200, help="Synthetic outputs per run")
    parser.add_argument("--synthetic-blocks", type=int, default=500, help="Error blocks per synthetic output")
    parser.add_argument("--runs", type=int, default=3, help="Measured runs per strategy")
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")
    args = parser.parse_args()

    dataset, outputs = _load_outputs(args)
    total_lines = sum(output.count("\n") for output in outputs)
    runs = max(args.runs, 1)

    print(f"Dataset: {dataset}")
    print(f"Outputs: {len(outputs)}  Lines: {total_lines}  Runs: {runs}")
    print(f"{'strategy':<10} {'ansi':<6} {'diagnostics':>12} {'median s':>10} {'lines/s':>12}")
    for name, strategy in STRATEGIES.items():
        for strip_ansi in (True, False):
            timings, diagnostics = _time_strategy(
                strategy,
                outputs,
                strip_ansi=strip_ansi,
                runs=runs,
                label=f"{name} strip_ansi={strip_ansi}",
                show_progress=not args.no_progress,
            )
            median = statistics.median(timings)
            ansi = "strip" if strip_ansi else "raw"
            print(f"{name:<10} {ansi:<6} {diagnostics:>12} {median:>10.4f} {total_lines / median:>12.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
