"""Console output helpers.

Results go to stdout, errors and diagnostics to stderr. User-supplied text is
escaped before it reaches rich markup.
"""

import os

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def printable(text: str) -> str:
    """Markup-escaped text, with undecodable filename bytes shown as "?"."""
    return escape(text.encode("utf-8", "replace").decode("utf-8"))


def raw_path(text: str) -> bytes:
    """Filesystem bytes for a stored path, restoring undecodable bytes."""
    try:
        return os.fsencode(text)
    except UnicodeEncodeError:
        return text.encode("utf-8", "replace")


def print_error(message: str) -> None:
    err_console.print(f"[red]Error: {printable(message)}[/red]")


def print_dim(message: str) -> None:
    err_console.print(f"[dim]{printable(message)}[/dim]")
