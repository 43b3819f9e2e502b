"""
Log Levels

Defines the ordered severity scale used by service loggers. Ranks share the
numeric values of the standard library ``logging`` constants so they can be
handed to structlog's level filter unchanged.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from servicelog.core.domain.errors import ConfigurationError


class LogLevel(IntEnum):
    """Severity of a log line, ordered debug < info < warn < error."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def token(self) -> str:
        """Lowercase token used in options and JSON output."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Uppercase label used in human readable lines."""
        return self.name

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        return tuple(level.token for level in cls)

    @classmethod
    def parse(cls, token: str) -> "LogLevel":
        """Parse a level token.

        Matching is exact and case-sensitive: ``"debug"`` is accepted,
        ``"DEBUG"`` and ``"warning"`` are not.

        Raises:
            ConfigurationError: If the token is not a recognized level.
        """
        for level in cls:
            if level.token == token:
                return level
        allowed = cls.tokens()
        raise ConfigurationError(
            f"Invalid log level {token!r}; expected one of: {', '.join(allowed)}",
            details={"field": "level", "token": token, "allowed": list(allowed)},
        )


# structlog reports "warn" calls under the "warning" method name
_METHOD_LEVELS = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "error": LogLevel.ERROR,
}


def level_for_method(method_name: str) -> LogLevel:
    """Map a structlog method name to its LogLevel."""
    return _METHOD_LEVELS[method_name]
