"""User-facing messages."""

from typing import Optional

from rich.console import Console
from rich.markup import escape


class Reporter:
    """Prints prefixed messages for the user."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def info(self, message: str) -> None:
        self.console.print(f"[green]INFO:[/green] {escape(message)}", highlight=False, soft_wrap=True)

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]WARN:[/yellow] {escape(message)}", highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]ERROR:[/red] {escape(message)}", highlight=False, soft_wrap=True)
