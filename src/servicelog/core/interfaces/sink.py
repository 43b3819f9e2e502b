"""
Line Sink Protocol

Defines the LineSink interface that receives formatted log lines, keeping
the logger independent of where its output ends up (stdout, a test buffer,
any callable).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSink(Protocol):
    """Protocol for objects that accept one formatted log line per call."""

    def __call__(self, line: str) -> None:
        """Write a single line (without trailing newline)."""
        ...
