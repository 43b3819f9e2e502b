"""
Line Rendering Processors

structlog processors that turn a logging call into one output line.

Usage:
    processors = build_processors("billing", json_output=False, colors=True)
    # -> [add service, add level, timestamp, ServiceLineRenderer]

Human readable lines look like::

    [17-10-2026 09:30:00](billing)[INFO] payment accepted

JSON lines carry ``timestamp``, ``service``, ``level`` and ``message``.
"""

from __future__ import annotations

import structlog
from rich.console import Console
from rich.text import Text
from structlog.typing import EventDict, Processor, WrappedLogger

from servicelog.core.domain.levels import LogLevel, level_for_method

TEXT_TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"

LEVEL_STYLES = {
    LogLevel.ERROR: "red",
    LogLevel.WARN: "yellow",
    LogLevel.INFO: "cyan",
    LogLevel.DEBUG: "green",
}
PUNCTUATION_STYLE = "bright_black"
TIMESTAMP_STYLE = "bright_blue"
SERVICE_STYLE = "bright_magenta"


class ServiceNameAdder:
    """Processor stamping the service name on every event."""

    def __init__(self, service: str):
        self.service = service

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["service"] = self.service
        return event_dict


def add_level_token(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor storing the level token ("warn", not "warning")."""
    event_dict["level"] = level_for_method(method_name).token
    return event_dict


class ServiceLineRenderer:
    """Final processor rendering ``[time](service)[LEVEL] message``.

    With colors enabled the prefix is rendered through a rich Console into
    ANSI escape sequences; the message is appended verbatim.
    """

    def __init__(self, colors: bool = False):
        self.colors = colors
        self._console = (
            Console(force_terminal=True, color_system="standard", soft_wrap=True, highlight=False)
            if colors
            else None
        )

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        level = level_for_method(method_name)
        timestamp = str(event_dict.get("timestamp", ""))
        service = str(event_dict.get("service", ""))
        message = str(event_dict.get("event", ""))

        if not self.colors:
            return f"[{timestamp}]({service})[{level.label}] {message}"

        text = Text()
        text.append("[", style=PUNCTUATION_STYLE)
        text.append(timestamp, style=TIMESTAMP_STYLE)
        text.append("]", style=PUNCTUATION_STYLE)
        text.append("(", style=PUNCTUATION_STYLE)
        text.append(service, style=SERVICE_STYLE)
        text.append(")", style=PUNCTUATION_STYLE)
        text.append("[", style=PUNCTUATION_STYLE)
        text.append(level.label, style=LEVEL_STYLES[level])
        text.append("]", style=PUNCTUATION_STYLE)
        return f"{self._to_ansi(text)} {message}"

    def _to_ansi(self, text: Text) -> str:
        with self._console.capture() as capture:
            self._console.print(text, end="")
        return capture.get()


def build_processors(service: str, *, json_output: bool = False, colors: bool = False) -> list[Processor]:
    """Build the processor chain for one service logger."""
    processors: list[Processor] = [
        ServiceNameAdder(service),
        add_level_token,
    ]
    if json_output:
        processors.extend(
            [
                structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
                structlog.processors.EventRenamer("message"),
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.extend(
            [
                structlog.processors.TimeStamper(fmt=TEXT_TIMESTAMP_FORMAT, utc=True, key="timestamp"),
                ServiceLineRenderer(colors=colors),
            ]
        )
    return processors
