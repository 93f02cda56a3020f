"""Tests for marker_cli.config module."""

import os
import tempfile
from pathlib import Path

import pytest

from marker_cli.config import DEFAULT_LOG_FORMAT, MarkerConfig
from marker_cli.types import ConfigError


class TestMarkerConfigFromDict:
    """Tests for MarkerConfig.from_dict()."""

    def test_default_values(self):
        """Empty dict should give defaults."""
        config = MarkerConfig.from_dict({})
        assert config.store_path == ""
        assert config.strict is False
        assert config.log_level == "WARNING"
        assert config.log_file == ""
        assert config.log_format == DEFAULT_LOG_FORMAT

    def test_store_config(self):
        config = MarkerConfig.from_dict({
            "store": {"path": "/tmp/markers.json", "strict": True},
        })
        assert config.store_path == "/tmp/markers.json"
        assert config.strict is True

    def test_logging_config(self):
        config = MarkerConfig.from_dict({
            "logging": {
                "level": "DEBUG",
                "file": "/tmp/marker.log",
                "max_bytes": 1024,
                "backup_count": 1,
            },
        })
        assert config.log_level == "DEBUG"
        assert config.log_file == "/tmp/marker.log"
        assert config.log_max_bytes == 1024
        assert config.log_backup_count == 1

    def test_null_sections(self):
        """Sections left empty in YAML load as None."""
        config = MarkerConfig.from_dict({"store": None, "logging": None})
        assert config.store_path == ""
        assert config.log_level == "WARNING"

    def test_non_mapping_document(self):
        with pytest.raises(ConfigError, match="config must be a mapping"):
            MarkerConfig.from_dict(["a", "b"])

    @pytest.mark.parametrize("section", ["store", "logging"])
    def test_non_mapping_section(self, section):
        with pytest.raises(ConfigError, match=f"'{section}' section must be a mapping"):
            MarkerConfig.from_dict({section: "foo"})

    def test_numeric_store_path_becomes_string(self):
        assert MarkerConfig.from_dict({"store": {"path": 42}}).store_path == "42"


class TestMarkerConfigLoad:
    """Tests for MarkerConfig.load() from YAML files."""

    def test_load_yaml(self):
        yaml_content = """
store:
  path: ~/markers.json
  strict: true

logging:
  level: INFO
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            try:
                config = MarkerConfig.load(f.name)
                assert config.store_path == "~/markers.json"
                assert config.strict is True
                assert config.log_level == "INFO"
            finally:
                os.unlink(f.name)

    def test_load_nonexistent_file(self):
        """Should raise FileNotFoundError for missing file."""
        with pytest.raises(FileNotFoundError):
            MarkerConfig.load("/nonexistent/path/config.yaml")

    def test_load_list_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            MarkerConfig.load(str(path))

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        config = MarkerConfig.load(str(path))
        assert config.strict is False


class TestMarkerConfigMethods:
    """Tests for MarkerConfig instance methods."""

    def test_get_store_path_expands_tilde(self):
        config = MarkerConfig(store_path="~/markers.json")
        assert config.get_store_path() == Path.home() / "markers.json"

    def test_get_store_path_default(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MARKER_STORE", str(tmp_path / "env.json"))
        assert MarkerConfig().get_store_path() == tmp_path / "env.json"

    def test_configured_path_beats_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MARKER_STORE", str(tmp_path / "env.json"))
        config = MarkerConfig(store_path=str(tmp_path / "cfg.json"))
        assert config.get_store_path() == tmp_path / "cfg.json"
