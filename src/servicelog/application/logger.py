"""
Service Logger

A named, leveled logger. Each instance owns its own structlog pipeline:
a filtering bound logger at the configured level, a processor chain that
renders one line, and a sink receiving the line.

Usage:
    log = Logger("billing", {"level": "debug"})
    log.info("payment accepted")
    log.error(describe_error(exc))
"""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

import structlog

from servicelog.core.domain.errors import ConfigurationError
from servicelog.core.domain.levels import LogLevel
from servicelog.core.domain.options import LoggerOptions
from servicelog.core.interfaces.sink import LineSink
from servicelog.infrastructure.rendering import build_processors
from servicelog.infrastructure.sinks import SinkLogger, StreamSink

logger = structlog.get_logger()


class Logger:
    """
    Leveled message emitter for one service.

    A call is emitted only when its level ranks at or above the configured
    minimum level. Emitted calls produce exactly one line on the sink, in
    call order; concurrent calls on one instance are serialized.

    Emission methods take text. Exceptions must be converted by the caller,
    e.g. with ``describe_error``.
    """

    def __init__(
        self,
        name: str,
        options: LoggerOptions | Mapping[str, Any] | None = None,
        *,
        sink: Optional[LineSink] = None,
    ):
        """
        Create a service logger.

        Args:
            name: Service name shown on every line. Must not be blank.
            options: LoggerOptions or a mapping such as ``{"level": "debug"}``.
                Defaults to level ``info``, human readable output.
            sink: Callable receiving each formatted line. Defaults to a
                StreamSink on stdout.

        Raises:
            ConfigurationError: If the name is blank or the options are invalid.
        """
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(
                "Logger name must be a non-empty string",
                details={"field": "name", "value": repr(name)},
            )

        self._name = name
        self._options = LoggerOptions.coerce(options)
        self._sink: LineSink = sink if sink is not None else StreamSink()
        self._lock = threading.Lock()
        self._colors = self._resolve_colors()

        self._bound = structlog.wrap_logger(
            SinkLogger(self._sink),
            processors=build_processors(
                name,
                json_output=self._options.json_output,
                colors=self._colors,
            ),
            wrapper_class=structlog.make_filtering_bound_logger(int(self._options.level)),
            cache_logger_on_first_use=True,
        )

        # unconfigured structlog prints to stdout, the default sink
        if structlog.is_configured():
            logger.debug(
                "service_logger_created",
                service=name,
                level=self._options.level.token,
                json_output=self._options.json_output,
                colors=self._colors,
            )

    def _resolve_colors(self) -> bool:
        if self._options.json_output:
            return False
        if self._options.colors is not None:
            return self._options.colors
        return isinstance(self._sink, StreamSink) and self._sink.isatty()

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel:
        return self._options.level

    @property
    def options(self) -> LoggerOptions:
        return self._options

    @property
    def sink(self) -> LineSink:
        return self._sink

    def is_enabled(self, level: LogLevel | str) -> bool:
        """Return True if calls at ``level`` would be emitted."""
        if not isinstance(level, LogLevel):
            level = LogLevel.parse(level)
        return level >= self._options.level

    def debug(self, message: Any) -> None:
        """Log a debug message."""
        with self._lock:
            self._bound.debug(str(message))

    def info(self, message: Any) -> None:
        """Log an info message."""
        with self._lock:
            self._bound.info(str(message))

    def warn(self, message: Any) -> None:
        """Log a warning message."""
        with self._lock:
            self._bound.warning(str(message))

    def error(self, message: Any) -> None:
        """Log an error message."""
        with self._lock:
            self._bound.error(str(message))

    def log(self, level: LogLevel | str, message: Any) -> None:
        """Log a message at a level given as LogLevel or token."""
        if not isinstance(level, LogLevel):
            level = LogLevel.parse(level)
        getattr(self, level.token)(message)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, level={self._options.level.token!r})"
