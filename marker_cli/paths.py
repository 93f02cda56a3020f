"""Per-user file locations for the markers store and tool config."""

import os
import sys
from pathlib import Path

from platformdirs import user_config_dir

from .types import ConfigDirError

APP_NAME = "marker_cli"
APP_AUTHOR = "example"
APP_ID = "com.example.marker_cli"  # macOS bundle-style directory name

STORE_FILE_NAME = "markers.json"
CONFIG_FILE_NAME = "config.yaml"

STORE_ENV_VAR = "MARKER_STORE"
CONFIG_ENV_VAR = "MARKER_CONFIG"


def config_dir() -> Path:
    """Return the platform-specific config directory for the application.

    Raises:
        ConfigDirError: If the directory cannot be resolved.
    """
    app_name = APP_ID if sys.platform == "darwin" else APP_NAME
    try:
        path = user_config_dir(app_name, APP_AUTHOR, roaming=True)
    except (KeyError, OSError, RuntimeError) as e:
        raise ConfigDirError(f"Could not determine config directory: {e}") from e
    if not path:
        raise ConfigDirError("Could not determine config directory")
    return Path(path)


def default_store_path() -> Path:
    """Store location, honouring the MARKER_STORE override."""
    env_path = os.environ.get(STORE_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return config_dir() / STORE_FILE_NAME


def default_config_file() -> Path:
    return config_dir() / CONFIG_FILE_NAME
