"""Demo command - Replay the reference usage of a service logger."""

from typing import Optional

import typer

from servicelog.api.cli.output_formatter import ServiceLogConsole
from servicelog.application.logger import Logger
from servicelog.core.domain.errors import ConfigurationError, describe_error

console = ServiceLogConsole()


def demo(
    name: str = typer.Option("new", "--name", "-n", help="Service name shown on each line"),
    level: str = typer.Option("debug", "--level", "-l", help="Minimum level: debug, info, warn or error"),
    iterations: int = typer.Option(10, "--iterations", "-i", min=0, help="Number of rounds to emit"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Force colors on or off"),
):
    """Emit info, warn, error and debug lines in a loop.

    Each round logs ``info``, ``warn``, the text of an ``Exception("error")``
    at error level, then ``debug``.

    Examples:
        servicelog demo
        servicelog demo --level error --iterations 3
    """
    try:
        log = Logger(name, {"level": level, "json": json_output, "colors": color})
    except ConfigurationError as e:
        console.print_error(e.message)
        raise typer.Exit(2)

    for _ in range(iterations):
        log.info("info")
        log.warn("warn")
        log.error(describe_error(Exception("error")))
        log.debug("debug")
