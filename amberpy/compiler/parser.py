"""Line scanner that recovers structured diagnostics from compiler output."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
import logging

from amberpy.compiler.lines import LineKind, classify_output_line
from amberpy.config import UnlocatedPolicy
from amberpy.diagnostics import Diagnostic
from amberpy.text import split_lines, strip_ansi as _strip_ansi

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _PendingDiagnostic:
    header_line: int
    message_lines: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "\n".join(self.message_lines)


@dataclass(slots=True)
class ScanState:
    """Transient state while scanning; at most one diagnostic is pending."""

    pending: _PendingDiagnostic | None = None
    line_number: int = 0


class OutputScanner:
    """Incremental compiler-output scanner.

    Feed physical lines in order with `feed`; each call returns the
    diagnostics finalized by that line. Call `finish` once at end of input.
    """

    def __init__(
        self,
        *,
        strip_ansi: bool = True,
        unlocated: UnlocatedPolicy = UnlocatedPolicy.DROP,
    ) -> None:
        self._strip_ansi = strip_ansi
        self._unlocated = UnlocatedPolicy(unlocated)
        self._state = ScanState()
        self._finished = False

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def has_pending(self) -> bool:
        return self._state.pending is not None

    def feed(self, raw_line: str) -> list[Diagnostic]:
        if self._finished:
            raise RuntimeError("OutputScanner already finished")

        state = self._state
        state.line_number += 1
        text = raw_line.rstrip("\r\n")
        if self._strip_ansi:
            text = _strip_ansi(text)

        classified = classify_output_line(text)
        emitted: list[Diagnostic] = []

        match classified.kind:
            case LineKind.HEADER:
                if state.pending is not None:
                    emitted.extend(self._abandon(state.pending, reason="superseded by a new header"))
                state.pending = _PendingDiagnostic(
                    header_line=state.line_number,
                    message_lines=[classified.message],
                )
            case LineKind.LOCATION if state.pending is not None:
                emitted.append(
                    Diagnostic(
                        message=state.pending.message,
                        file=classified.file,
                        line=classified.line,
                        column=classified.column,
                    )
                )
                state.pending = None
            case _ if state.pending is not None:
                state.pending.message_lines.append(classified.text)
            case _:
                pass

        return emitted

    def finish(self) -> list[Diagnostic]:
        if self._finished:
            return []
        self._finished = True
        pending = self._state.pending
        self._state.pending = None
        if pending is None:
            return []
        return self._abandon(pending, reason="no location before end of output")

    def _abandon(self, pending: _PendingDiagnostic, *, reason: str) -> list[Diagnostic]:
        if self._unlocated == UnlocatedPolicy.KEEP:
            logger.debug("Keeping unlocated diagnostic from line %d (%s)", pending.header_line, reason)
            return [Diagnostic.unlocated(pending.message)]
        logger.debug("Dropping diagnostic header on line %d (%s)", pending.header_line, reason)
        return []


def iter_compiler_diagnostics(
    lines: Iterable[str],
    *,
    strip_ansi: bool = True,
    unlocated: UnlocatedPolicy = UnlocatedPolicy.DROP,
) -> Iterator[Diagnostic]:
    """Lazily yield diagnostics in the order they are finalized."""
    scanner = OutputScanner(strip_ansi=strip_ansi, unlocated=unlocated)
    for line in lines:
        yield from scanner.feed(line)
    yield from scanner.finish()


def parse_compiler_lines(
    lines: Iterable[str],
    *,
    strip_ansi: bool = True,
    unlocated: UnlocatedPolicy = UnlocatedPolicy.DROP,
) -> list[Diagnostic]:
    """Parse an iterable of physical lines (e.g. an open stream)."""
    return list(iter_compiler_diagnostics(lines, strip_ansi=strip_ansi, unlocated=unlocated))


def parse_compiler_output(
    output: str,
    *,
    strip_ansi: bool = True,
    unlocated: UnlocatedPolicy = UnlocatedPolicy.DROP,
) -> list[Diagnostic]:
    """Parse the combined output of one compiler invocation."""
    return parse_compiler_lines(
        (line.text for line in split_lines(output)),
        strip_ansi=strip_ansi,
        unlocated=unlocated,
    )
