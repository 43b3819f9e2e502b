"""
Infrastructure Layer

- Line sinks (stdout stream, in-memory buffer)
- structlog processors rendering human readable and JSON lines
"""

from servicelog.infrastructure.rendering import ServiceLineRenderer, build_processors
from servicelog.infrastructure.sinks import MemorySink, SinkLogger, StreamSink

__all__ = [
    "MemorySink",
    "ServiceLineRenderer",
    "SinkLogger",
    "StreamSink",
    "build_processors",
]
