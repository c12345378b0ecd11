"""Rich console singletons and helpers for terminal output."""

from rich.console import Console

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error: {message}[/red]")
