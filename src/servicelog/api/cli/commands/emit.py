"""Emit command - Log a single message."""

from typing import Optional

import typer

from servicelog.api.cli.output_formatter import ServiceLogConsole
from servicelog.application.logger import Logger
from servicelog.core.domain.errors import ConfigurationError
from servicelog.core.domain.levels import LogLevel

console = ServiceLogConsole()


def emit(
    level: str = typer.Argument(..., help="Level of the message: debug, info, warn or error"),
    message: str = typer.Argument(..., help="Message text"),
    name: str = typer.Option("cli", "--name", "-n", help="Service name shown on the line"),
    min_level: str = typer.Option("info", "--min-level", "-m", help="Minimum level that gets emitted"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON line"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Force colors on or off"),
):
    """Log one message through a service logger.

    Nothing is printed when LEVEL ranks below --min-level.
    """
    try:
        message_level = LogLevel.parse(level)
        log = Logger(name, {"level": min_level, "json": json_output, "colors": color})
    except ConfigurationError as e:
        console.print_error(e.message)
        raise typer.Exit(2)

    log.log(message_level, message)
