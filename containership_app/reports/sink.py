"""
Report sinks: write-only line channels for human-readable output.

Containers and ships never print directly; every summary, hazard alert and
boarding message goes through a sink so drivers and tests can choose where
the lines end up.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Protocol, TextIO, runtime_checkable


@runtime_checkable
class ReportSink(Protocol):
    def write(self, line: str) -> None:
        ...


class ConsoleSink:
    """Write each line to a text stream (stdout unless given)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)


class LoggingSink:
    """Forward report lines to a logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("containership_app.report")
        self._level = level

    def write(self, line: str) -> None:
        self._logger.log(self._level, "%s", line)


class MemorySink:
    """Collect report lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


_default_sink: ReportSink = ConsoleSink()


def get_default_sink() -> ReportSink:
    return _default_sink


def set_default_sink(sink: ReportSink) -> ReportSink:
    """Replace the sink used when none is injected; returns the previous one."""
    global _default_sink
    previous = _default_sink
    _default_sink = sink
    return previous
