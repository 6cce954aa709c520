"""Helper functions for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def configure_logging(verbose: bool) -> None:
    """Route library log records through rich.

    Args:
        verbose: If True, show debug records; otherwise only warnings.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def parse_int_literal(value: str) -> int:
    """Parse a decimal, hex, octal or binary integer literal.

    Args:
        value: Text such as "291", "0x0123", "0o443" or "0b100100011".

    Returns:
        The parsed integer.

    Raises:
        ValueError: If value is not an integer literal.
    """
    try:
        return int(value.strip(), 0)
    except ValueError as e:
        raise ValueError(f"Invalid integer value: {value!r}") from e
