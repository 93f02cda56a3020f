"""Marker CLI application."""

import os
from pathlib import Path

import click
import yaml

from .. import __version__
from ..config import MarkerConfig
from ..paths import CONFIG_ENV_VAR, default_config_file
from ..types import ConfigDirError, ConfigError
from ..utils.logging import setup_logging
from .display import print_dim, print_error


def find_config() -> str | None:
    """
    Find config file using standard priority order:

    1. MARKER_CONFIG environment variable
    2. <user config dir>/config.yaml

    Returns None if no config found.

    Raises:
        ConfigDirError: If the user config directory cannot be determined.
    """
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        path = Path(env_config).expanduser()
        if path.exists():
            return str(path)

    user_config = default_config_file()
    if user_config.exists():
        return str(user_config)

    return None


@click.group()
@click.version_option(version=__version__, prog_name="marker")
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Config file path")
@click.option("--no-config", is_flag=True, help="Disable config auto-loading")
@click.option("--store", "-s", type=click.Path(path_type=Path), help="Markers file path")
@click.option("--strict", is_flag=True, help="Fail on a malformed markers file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    no_config: bool,
    store: Path | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Marker: persistent directory markers.

    Attach a short flag name to a directory and retrieve it later.

    Config file locations (in priority order):

        1. -c/--config PATH (explicit)

        2. MARKER_CONFIG env var

        3. <user config dir>/config.yaml

    Examples:

        marker set -f proj -d ~/code/proj

        cd "$(marker retrieve -f proj)"

        marker delete -r
    """
    ctx.ensure_object(dict)

    try:
        if no_config:
            config = None
        elif config is None:
            config = find_config()

        settings = MarkerConfig.load(config) if config else MarkerConfig()
        store_path = store if store is not None else settings.get_store_path()
    except ConfigDirError as e:
        print_error(str(e))
        raise SystemExit(1)
    except (OSError, yaml.YAMLError, ConfigError) as e:
        print_error(f"Failed to load config {config}: {e}")
        raise SystemExit(1)

    try:
        setup_logging(settings, level="DEBUG" if verbose else None)
    except (OSError, TypeError, ValueError) as e:
        print_error(f"Failed to set up logging: {e}")
        raise SystemExit(1)

    if verbose:
        if config:
            print_dim(f"Using config: {config}")
        print_dim(f"Using markers file: {store_path}")

    ctx.obj["config"] = config
    ctx.obj["store_path"] = store_path
    ctx.obj["strict"] = strict or settings.strict
    ctx.obj["verbose"] = verbose


# Import and register commands
from .commands import markers, version

cli.add_command(markers.set_marker)
cli.add_command(markers.delete_marker)
cli.add_command(markers.retrieve_marker)
cli.add_command(markers.list_markers)
cli.add_command(version.version)
