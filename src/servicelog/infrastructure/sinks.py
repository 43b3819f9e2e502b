"""
Line Sinks

Concrete LineSink implementations plus the adapter that lets structlog write
rendered lines into any sink.

Usage:
    sink = StreamSink()            # stdout
    sink = StreamSink(sys.stderr)
    sink = MemorySink()            # collects lines, e.g. in tests
"""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from servicelog.core.interfaces.sink import LineSink


class StreamSink:
    """
    Sink writing one line per call to a text stream.

    The default stream is ``sys.stdout``, resolved on every write so that
    redirection (pytest capture, ``contextlib.redirect_stdout``) is honoured.
    Writes are serialized with a lock shared by all users of the sink.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def isatty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty()) if isatty is not None else False
        except ValueError:
            # closed stream
            return False

    def __call__(self, line: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(line + "\n")
            stream.flush()


class MemorySink:
    """Sink keeping every line in memory."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._lock = threading.Lock()

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)

    def __call__(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)


class SinkLogger:
    """
    structlog wrapped logger forwarding rendered lines to a LineSink.

    structlog calls the method named after the log level with the output of
    the final processor; every level goes to the same sink.
    """

    def __init__(self, sink: LineSink):
        self.sink = sink

    def __repr__(self) -> str:
        return f"<SinkLogger(sink={self.sink!r})>"

    def msg(self, message: str) -> None:
        self.sink(message)

    debug = info = warn = warning = error = msg
