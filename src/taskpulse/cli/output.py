"""Colorful CLI output helpers."""

from rich.console import Console

CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗

# Rich drops styling on its own when stdout is not a terminal
console = Console(highlight=False)


def success(message: str) -> None:
    """Print success message with green checkmark."""
    console.print(f"[green]{CHECK}[/] {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    console.print(f"[yellow]{BULLET}[/] {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    console.print(f"[bold blue]{message}[/]")


def error(message: str) -> None:
    """Print error message with red cross."""
    console.print(f"[red]{CROSS}[/] {message}")
