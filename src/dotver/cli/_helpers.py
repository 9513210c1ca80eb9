"""Output and logging helpers for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..version import Version

console = Console()

ZERO_VERSION_LABEL = "(zero version)"


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def display(version: Version) -> str:
    """Return a human-readable form of a version.

    The zero version renders as an empty string, which is invisible on a
    terminal, so it is shown with a label instead.
    """
    return str(version) or ZERO_VERSION_LABEL


def configure_logging(verbose: bool) -> None:
    """Route dotver log records through rich.

    Args:
        verbose: If True, show debug records. Otherwise only warnings.
    """
    logger = logging.getLogger("dotver")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
