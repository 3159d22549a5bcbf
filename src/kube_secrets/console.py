"""Rich console utilities for styled terminal output.

This module provides the status helpers used across the CLI and the
renderer for filtered secret listings.
"""

from collections.abc import Generator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from kube_secrets.models import FilterResult
from kube_secrets.secrets.classification import describe_kind

# Custom theme with consistent colors
_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "highlight": "cyan bold",
        "secret": "bright_blue",
        "kind": "green",
        "muted": "dim",
    }
)

# Shared console instance
console = Console(theme=_THEME)


def info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The message to display.

    """
    console.print(f"[info]ℹ[/info] {message}")


def warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: The message to display.

    """
    console.print(f"[warning]⚠[/warning] {message}")


def error(message: str) -> None:
    """Print an error message.

    Args:
        message: The message to display.

    """
    console.print(f"[error]✗[/error] {message}")


def action(message: str) -> None:
    """Print an action/progress message.

    Args:
        message: The message to display.

    """
    console.print(f"[info]→[/info] {message}")


def highlight(text: str) -> str:
    """Return text wrapped in highlight markup.

    Args:
        text: The text to highlight.

    Returns:
        Text wrapped in Rich markup for highlighting.

    """
    return f"[highlight]{escape(text)}[/highlight]"


@contextmanager
def spinner(message: str) -> Generator[None, None, None]:
    """Display a spinner while performing an operation.

    Args:
        message: The status message to display.

    Yields:
        None

    """
    with console.status(f"[info]{message}[/info]", spinner="dots"):
        yield


def render_secrets(results: FilterResult, namespace: str, total: int, query: str | None = None) -> None:
    """Print the filtered secrets of a namespace.

    One line is printed per secret with its name and type. An explicit
    message is printed instead when nothing is left after filtering.

    Args:
        results: The filtered secrets, already sorted.
        namespace: The namespace the secrets belong to.
        total: Number of secrets in the namespace before filtering.
        query: The name filter used, if any.

    """
    if not results:
        if query:
            warning(f"No secrets matching {highlight(query)} found in namespace {highlight(namespace)}")
        else:
            warning(f"No secrets found in namespace {highlight(namespace)}")
        return

    for record in results:
        label = escape(describe_kind(record.kind))
        console.print(f"[secret]{escape(record.name)}[/secret]  [kind]{label}[/kind]")

    console.print(f"[muted]Showing {len(results)} of {total} secrets in namespace '{escape(namespace)}'[/muted]")
