"""Console output helpers built on rich."""

from rich.console import Console

_console = Console()
_error_console = Console(stderr=True)


def get_console() -> Console:
    """Return the shared stdout console."""
    return _console


def print_info(message: str) -> None:
    _console.print(f"[cyan]{message}[/cyan]")


def print_success(message: str) -> None:
    _console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    _error_console.print(f"[yellow]Warning:[/yellow] {message}")


def print_error(message: str) -> None:
    _error_console.print(f"[red bold]Error:[/red bold] {message}")
