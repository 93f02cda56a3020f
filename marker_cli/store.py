"""
JSON-file backed marker store.

The store maps flag names to directory paths and persists them as::

    {"map": {"<flag>": "<directory>"}}

A missing file loads as an empty store. A malformed file also loads as an
empty store unless strict loading is requested; the fallback is logged.
Saves go through a temporary file in the same directory followed by
``os.replace`` so the previous file is never left truncated.

There is no locking: two processes that load, mutate and save concurrently
race, and the last writer wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from .types import (
    InvalidArgumentError,
    Marker,
    MarkerNotFoundError,
    StoreCorruptError,
    StoreIOError,
)

logger = logging.getLogger(__name__)

MAP_KEY = "map"


class MarkerStore:
    """In-memory mapping of flag name to directory path."""

    def __init__(self, entries: Optional[Dict[str, str]] = None) -> None:
        self.entries: Dict[str, str] = dict(entries or {})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkerStore):
            return NotImplemented
        return self.entries == other.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, flag: object) -> bool:
        return flag in self.entries

    def __repr__(self) -> str:
        return f"MarkerStore({self.entries!r})"

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Union[str, Path], strict: bool = False) -> "MarkerStore":
        """
        Load a store from a JSON file.

        Args:
            path: Store file location
            strict: Raise on a malformed file instead of starting empty

        Returns:
            MarkerStore instance (empty if the file does not exist)

        Raises:
            StoreIOError: If the file exists but cannot be read
            StoreCorruptError: If the file is malformed and ``strict`` is set
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No markers file at %s, starting empty", path)
            return cls()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"Failed to read markers file {path}: {e}") from e

        try:
            entries = cls._parse(content)
        except ValueError as e:
            if strict:
                raise StoreCorruptError(f"Markers file {path} is malformed: {e}") from e
            logger.warning("Markers file %s is malformed (%s), using an empty store", path, e)
            return cls()

        logger.debug("Loaded %d marker(s) from %s", len(entries), path)
        return cls(entries)

    @staticmethod
    def _parse(content: str) -> Dict[str, str]:
        """Validate a markers document. Raises ValueError on any schema violation."""
        data = json.loads(content)  # json.JSONDecodeError is a ValueError
        if not isinstance(data, dict):
            raise ValueError("top-level value is not an object")
        entries = data.get(MAP_KEY)
        if not isinstance(entries, dict):
            raise ValueError(f"'{MAP_KEY}' is missing or not an object")
        for flag, directory in entries.items():
            if not isinstance(directory, str):
                raise ValueError(f"path for '{flag}' is not a string")
        return entries

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {MAP_KEY: dict(self.entries)}

    def save(self, path: Union[str, Path]) -> None:
        """
        Write the store to ``path`` as pretty-printed JSON.

        Non-ASCII text is written as JSON unicode escapes so that paths carrying
        undecodable filename bytes (lone surrogates) survive the round trip.

        Parent directories are created as needed. The file is replaced
        atomically; on failure the previous content is left untouched.

        Raises:
            StoreIOError: If the directory or file cannot be written
        """
        path = Path(path)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(self.to_dict(), f, indent=2)
                f.write("\n")
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, ValueError) as e:
            raise StoreIOError(f"Failed to write markers file {path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug("Saved %d marker(s) to %s", len(self.entries), path)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set(self, flag: str, directory: str) -> None:
        """Insert or overwrite the mapping for ``flag``."""
        if not flag:
            raise InvalidArgumentError("Flag must not be empty")
        self.entries[flag] = directory

    def delete(self, flag: Optional[str] = None, recursive: bool = False) -> int:
        """
        Remove one marker, or all of them when ``recursive`` is set.

        Deleting a flag that is not present is not an error.

        Returns:
            Number of markers removed

        Raises:
            InvalidArgumentError: If neither ``flag`` nor ``recursive`` is given
        """
        if recursive:
            removed = len(self.entries)
            self.entries.clear()
            return removed
        if not flag:
            raise InvalidArgumentError("Either a flag or recursive must be specified")
        if self.entries.pop(flag, None) is None:
            return 0
        return 1

    def retrieve(self, flag: str) -> str:
        """
        Return the directory stored under ``flag``.

        Raises:
            MarkerNotFoundError: If the flag has no mapping
        """
        try:
            return self.entries[flag]
        except KeyError:
            raise MarkerNotFoundError(flag) from None

    def list_markers(self) -> List[Marker]:
        """All markers in insertion order."""
        return [Marker(flag, directory) for flag, directory in self.entries.items()]
