"""Allow ``python -m marker_cli``."""

from .cli import cli

if __name__ == "__main__":
    cli()
