"""Line sinks that receive rendered tree output."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class LineSink(ABC):
    """Destination for rendered lines, written in traversal order."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Append one line (without trailing newline) to the output."""


class StreamSink(LineSink):
    """Writes each line to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved at write time so redirected stdout is honored.
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")


class ListSink(LineSink):
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        """Return collected lines joined as they would appear on a terminal."""
        return "".join(line + "\n" for line in self.lines)
