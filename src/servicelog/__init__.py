"""
servicelog - named, leveled service logging.

    from servicelog import Logger

    log = Logger("billing", {"level": "debug"})
    log.info("payment accepted")
"""

from servicelog.application.logger import Logger
from servicelog.core.domain.errors import (
    ConfigurationError,
    ServiceLogError,
    describe_error,
)
from servicelog.core.domain.levels import LogLevel
from servicelog.core.domain.options import LoggerOptions
from servicelog.core.interfaces.sink import LineSink
from servicelog.infrastructure.sinks import MemorySink, StreamSink

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "LineSink",
    "LogLevel",
    "Logger",
    "LoggerOptions",
    "MemorySink",
    "ServiceLogError",
    "StreamSink",
    "__version__",
    "describe_error",
]
