"""
Marker CLI: persistent directory markers.

Attach a short flag name to a directory and look it up later. Markers are
kept in a JSON file in the per-user configuration directory.

Basic Usage:
    from marker_cli import MarkerStore
    from marker_cli.paths import default_store_path

    path = default_store_path()
    store = MarkerStore.load(path)
    store.set("proj", "/home/u/proj")
    store.save(path)
    print(store.retrieve("proj"))

Command line:
    marker set -f proj -d ~/code/proj
    cd "$(marker retrieve -f proj)"
"""

__version__ = "0.1.0"

from .config import MarkerConfig
from .store import MarkerStore
from .types import (
    ConfigDirError,
    ConfigError,
    InvalidArgumentError,
    Marker,
    MarkerError,
    MarkerNotFoundError,
    StoreCorruptError,
    StoreIOError,
)

__all__ = [
    "__version__",
    "MarkerConfig",
    "MarkerStore",
    "Marker",
    "MarkerError",
    "InvalidArgumentError",
    "MarkerNotFoundError",
    "StoreIOError",
    "StoreCorruptError",
    "ConfigDirError",
    "ConfigError",
]
