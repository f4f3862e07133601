"""Terminal presentation for gale.

A Presenter is created once per run by the CLI and handed to whatever
needs to print. Regular output goes to stdout, errors to stderr.
"""

from contextlib import nullcontext
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from gale import __version__

ICONS = {
    "check": "✔",
    "error": "✖",
    "warning": "!",
    "info": "i",
    "sparkles": "*",
    "gear": "»",
    "folder": "→",
}


class Presenter:
    """Colored status output, banner, help text and spinner."""

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        quiet: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.quiet = quiet

    def banner(self) -> None:
        self.console.print(
            "\n  [cyan]__[/cyan]\n"
            f"  [cyan]/ /[/cyan]  [bold]GALE[/bold] [bold]v{__version__}[/bold]\n"
            " [cyan]/ /___[/cyan] [dim]A modern CLI to fetch GitHub releases[/dim]\n"
        )

    def help(self) -> None:
        self.console.print(
            "\n[bold]USAGE[/bold]:\n"
            f"  gale {escape('[owner] [repo] [options]')}\n"
            "\n[bold]EXAMPLES[/bold]:\n"
            "  [cyan]gale[/cyan]                       # Fetch releases for the default repo\n"
            "  [cyan]gale[/cyan] microsoft vscode      # Fetch VS Code releases\n"
            "  [cyan]gale[/cyan] cli gh --count 20     # Fetch 20 GitHub CLI releases\n"
            "  [cyan]gale[/cyan] --help                # Show this help\n"
            "\n[bold]OPTIONS[/bold]:\n"
            "  [green]--count[/green], -c    Number of releases to fetch (default: 10)\n"
            "  [green]--output[/green], -o   Output file name (default: releases.json)\n"
            "  [green]--token[/green], -t    GitHub token (or use GITHUB_TOKEN env var)\n"
            "  [green]--quiet[/green], -q    Quiet mode (minimal output)\n"
            "  [green]--timeout[/green]      Request timeout in seconds (default: 30)\n"
            "  [green]--help[/green], -h     Show this help\n"
            "  [green]--version[/green], -v  Show version\n"
            "\n[bold]ENVIRONMENT[/bold]:\n"
            "  [yellow]GITHUB_TOKEN[/yellow]   Your GitHub personal access token\n"
        )

    def version(self) -> None:
        self.console.print(f"[bold]gale[/bold] v{__version__}")

    def spinner(self, message: str):
        """Spinner context for a long-running step; inert in quiet mode."""
        if self.quiet:
            return nullcontext()
        return self.console.status(message, spinner="dots")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{ICONS['warning']} {message}[/yellow]")

    def info(self, message: str, icon: str = "info") -> None:
        if self.quiet:
            return
        self.console.print(f"[cyan]{ICONS[icon]} {message}[/cyan]")

    def success(self, message: str) -> None:
        self.console.print(f"\n[green]{ICONS['check']} {message}[/green]")

    def dim(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(f"[dim]{ICONS['folder']} {message}[/dim]")

    def error(self, message: str) -> None:
        self.err_console.print(
            f"\n[red]{ICONS['error']} Error: {escape(message)}[/red]"
        )


def format_published_date(published_at: str | None) -> str:
    """Format an ISO 8601 timestamp like "Jan 02, 2006"."""
    if not published_at:
        return "an unknown date"
    try:
        moment = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    except ValueError:
        return published_at
    return moment.strftime("%b %d, %Y")
