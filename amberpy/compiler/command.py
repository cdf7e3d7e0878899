"""Compiler command-line construction."""

from __future__ import annotations

from pathlib import Path

from amberpy.config import AmberConfig


def compile_command(
    source: str | Path,
    output: str | Path | None = None,
    config: AmberConfig | None = None,
) -> list[str]:
    """Build the argv that compiles `source`, optionally into `output`.

    Spawning the process is left to the caller.
    """
    resolved = config if config is not None else AmberConfig()
    command = [resolved.executable, str(source)]
    if output is not None:
        command.append(str(output))
    return command
