"""servicelog CLI entry point."""

import logging
import sys

import structlog
import typer

from servicelog.api.cli.commands import demo, emit
from servicelog.api.cli.output_formatter import ServiceLogConsole

app = typer.Typer(
    name="servicelog",
    help="servicelog - named, leveled service logging",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("demo", help="Replay the logger usage demo")(demo.demo)
app.command("emit", help="Log a single message")(emit.emit)


def configure_diagnostics(debug: bool) -> None:
    """Route servicelog's own structlog diagnostics to stderr."""
    level = logging.DEBUG if debug else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Show servicelog's internal diagnostics on stderr"),
):
    """servicelog CLI."""
    configure_diagnostics(debug)


@app.command()
def version():
    """Show servicelog version."""
    from servicelog import __version__

    sl_console = ServiceLogConsole()
    sl_console.print_banner()
    sl_console.console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
