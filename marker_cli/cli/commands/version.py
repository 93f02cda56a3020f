"""Version command."""

import click

from ... import __version__
from ..display import console


@click.command()
def version() -> None:
    """Show Marker CLI version.

    Examples:

        marker version
    """
    console.print(f"[bold]marker[/bold] v{__version__}")
