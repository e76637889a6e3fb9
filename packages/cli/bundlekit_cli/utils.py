"""Console helpers shared by CLI commands."""

from rich.console import Console
from rich.markup import escape

# Plans are printed as JSON on stdout; everything else goes to stderr
err_console = Console(stderr=True)


def warning(message: str) -> None:
    err_console.print(f"[yellow]⚠[/yellow] {escape(message)}", soft_wrap=True)


def error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {escape(message)}", soft_wrap=True)


class ConsoleReporter:
    """Build reporter that prints warnings to stderr."""

    def warn(self, message: str) -> None:
        warning(message)
