"""
Marker CLI type definitions.

This module contains the public record type and the error hierarchy.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """A flag name bound to a directory path."""
    flag: str
    directory: str


class MarkerError(Exception):
    """Base class for errors reported to the user."""


class InvalidArgumentError(MarkerError):
    """Required parameter missing or mutually exclusive parameters misused."""


class MarkerNotFoundError(MarkerError):
    """A flag has no mapping in the store."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"Marker '{flag}' does not exist")
        self.flag = flag


class StoreIOError(MarkerError):
    """The store file or its directory could not be read or written."""


class StoreCorruptError(MarkerError):
    """The store file is not a valid markers document (strict mode only)."""


class ConfigDirError(MarkerError):
    """The per-user configuration directory could not be determined."""


class ConfigError(MarkerError):
    """The tool configuration file has the wrong shape."""
