"""Domain-specific exception types for servicelog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ServiceLogError(Exception):
    """Base exception for servicelog errors."""

    message: str
    code: str = "servicelog_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class ConfigurationError(ServiceLogError):
    """Error raised when a logger is built with an invalid name or options."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)


def describe_error(error: BaseException) -> str:
    """Render an exception as ``"<TypeName>: <message>"``.

    Emission methods take text only, so callers stringify exceptions before
    logging them. This helper gives the conventional form, e.g.
    ``describe_error(ValueError("boom"))`` returns ``"ValueError: boom"``.
    An exception without a message renders as its type name alone.
    """
    text = str(error)
    name = type(error).__name__
    return f"{name}: {text}" if text else name
