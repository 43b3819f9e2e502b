"""
Domain Models

This package contains the core domain models for servicelog:
- Log levels and token parsing
- Logger options
- Error taxonomy
"""

from servicelog.core.domain.errors import (
    ConfigurationError,
    ServiceLogError,
    describe_error,
)
from servicelog.core.domain.levels import LogLevel
from servicelog.core.domain.options import LoggerOptions

__all__ = [
    "ConfigurationError",
    "LogLevel",
    "LoggerOptions",
    "ServiceLogError",
    "describe_error",
]
