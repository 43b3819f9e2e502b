"""
Logger Options

Pydantic model validating the options a service logger is built with.
Validation failures surface as ConfigurationError so callers only ever
handle the domain taxonomy.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from servicelog.core.domain.errors import ConfigurationError
from servicelog.core.domain.levels import LogLevel


class LoggerOptions(BaseModel):
    """Options accepted by ``Logger``.

    Attributes:
        level: Minimum level that gets emitted. Given as a token
            (``"debug"``, ``"info"``, ``"warn"``, ``"error"``) and stored as
            a LogLevel.
        json_output: Emit JSON objects instead of human readable lines.
            Accepted under the ``json`` key.
        colors: Force colors on or off. ``None`` colors only terminal streams.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    level: LogLevel = Field(
        LogLevel.INFO,
        description="Minimum level token: debug, info, warn or error",
    )
    json_output: bool = Field(
        False,
        alias="json",
        description="Render each line as a JSON object",
    )
    colors: Optional[bool] = Field(
        None,
        description="Colorize human readable lines (None = auto)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, value: Any) -> LogLevel:
        """Parse the level token once, rejecting anything unrecognized."""
        if isinstance(value, LogLevel):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Log level must be a string token, got {type(value).__name__}",
                details={"field": "level", "token": repr(value)},
            )
        return LogLevel.parse(value)

    @classmethod
    def coerce(cls, options: "LoggerOptions | Mapping[str, Any] | None") -> "LoggerOptions":
        """Build options from a model, a plain mapping, or nothing.

        Raises:
            ConfigurationError: If the mapping has unknown keys or invalid values.
        """
        if options is None:
            return cls()
        if isinstance(options, LoggerOptions):
            return options
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"Logger options must be a mapping, got {type(options).__name__}",
                details={"field": "options"},
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ())) or "options"
            raise ConfigurationError(
                f"Invalid logger option {field!r}: {first.get('msg', 'invalid value')}",
                details={"field": field, "errors": e.errors(include_url=False)},
            ) from e
