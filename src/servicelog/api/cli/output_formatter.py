"""Rich output formatting for the servicelog CLI.

Log lines themselves go through the Logger's sink; this console only
carries CLI chrome (banner, version, errors).
"""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

SERVICELOG_THEME = Theme(
    {
        "banner": "bold blue",
        "brand": "bold cyan",
        "error": "bold red",
    }
)


class ServiceLogConsole:
    """Console pair for CLI output: stdout for chrome, stderr for errors."""

    def __init__(self):
        self.console = Console(theme=SERVICELOG_THEME)
        self.err_console = Console(theme=SERVICELOG_THEME, stderr=True)

    def print_banner(self):
        """Print the servicelog banner."""
        banner = Text()
        banner.append("=" * 40 + "\n", style="banner")
        banner.append("  SERVICELOG", style="brand")
        banner.append(" - leveled service logging\n", style="banner")
        banner.append("=" * 40, style="banner")
        self.console.print(banner)

    def print_error(self, message: str):
        """Print an error message to stderr.

        Args:
            message: Error message
        """
        self.err_console.print(Text(f"Error: {message}", style="error"))
