"""Console output helpers built on rich."""

from __future__ import annotations

from rich.console import Console


def create_console() -> Console:
    """Create the console used for warnings and coverage lines."""
    return Console(highlight=False, emoji=False)


def print_warning(console: Console, message: str) -> None:
    """Print ``message`` in red without interpreting markup in it."""
    console.print(message, style="red", markup=False, emoji=False, highlight=False)


def print_success(console: Console, message: str) -> None:
    """Print ``message`` in green without interpreting markup in it."""
    console.print(message, style="green", markup=False, emoji=False, highlight=False)
