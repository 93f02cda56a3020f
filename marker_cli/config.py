"""
Marker CLI configuration handling.

Provides YAML configuration loading for the store and logging settings.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .paths import default_store_path
from .types import ConfigError

DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


@dataclass
class MarkerConfig:
    """
    Marker CLI configuration.

    Can be loaded from a YAML file or created programmatically.
    """
    # Store
    store_path: str = ""
    strict: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""
    log_format: str = DEFAULT_LOG_FORMAT
    log_max_bytes: int = 10485760  # 10MB
    log_backup_count: int = 3

    @classmethod
    def load(cls, path: str) -> "MarkerConfig":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            MarkerConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file is invalid YAML
            ConfigError: If the YAML does not have the expected shape
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarkerConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            MarkerConfig instance

        Raises:
            ConfigError: If the data or one of its sections is not a mapping
        """
        if not isinstance(data, dict):
            raise ConfigError("config must be a mapping")
        store_cfg = _section(data, "store")
        logging_cfg = _section(data, "logging")

        return cls(
            store_path=str(store_cfg.get("path") or ""),
            strict=bool(store_cfg.get("strict", False)),
            log_level=logging_cfg.get("level", "WARNING"),
            log_file=str(logging_cfg.get("file") or ""),
            log_format=logging_cfg.get("format", DEFAULT_LOG_FORMAT),
            log_max_bytes=logging_cfg.get("max_bytes", 10485760),
            log_backup_count=logging_cfg.get("backup_count", 3),
        )

    def get_store_path(self) -> Path:
        """
        Get the resolved store file path.

        Returns:
            Configured path with ``~`` expanded, or the default location
        """
        if self.store_path:
            return Path(self.store_path).expanduser()
        return default_store_path()


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' section must be a mapping")
    return section
