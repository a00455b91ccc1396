"""
Tests for configuration.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from ghostly.config import Config


class TestConfig:
    """Tests for Config loading and saving."""

    def test_defaults(self):
        config = Config()

        assert config.max_results == 10
        assert config.normalize_project_paths is False
        assert config.memory_file.name == "memory.json"

    def test_save_and_load(self, tmp_path):
        """Test YAML round trip."""
        config_path = tmp_path / "config.yaml"
        config = Config(storage_path=tmp_path / "data", max_results=5, normalize_project_paths=True)

        config.save(config_path)
        loaded = Config.load(config_path)

        assert loaded.storage_path == tmp_path / "data"
        assert loaded.max_results == 5
        assert loaded.normalize_project_paths is True
        assert loaded.memory_file == tmp_path / "data" / "memory.json"

    def test_load_missing_file_uses_defaults(self, tmp_path):
        config = Config.load(tmp_path / "missing.yaml")

        assert config.max_results == 10

    def test_load_empty_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")

        assert Config.load(config_path).max_results == 10

    def test_env_override(self, monkeypatch, tmp_path):
        """Test GHOSTLY_ environment variables."""
        monkeypatch.setenv("GHOSTLY_STORAGE_PATH", str(tmp_path))
        monkeypatch.setenv("GHOSTLY_MAX_RESULTS", "7")

        config = Config()

        assert config.storage_path == tmp_path
        assert config.max_results == 7

    def test_max_results_bounds(self):
        with pytest.raises(PydanticValidationError):
            Config(max_results=0)

    def test_log_level_validated(self):
        """Test that unknown log levels are rejected and case is folded."""
        with pytest.raises(PydanticValidationError):
            Config(log_level="verbose")

        assert Config(log_level="info").log_level == "INFO"

    def test_invalid_log_level_in_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("log_level: verbose\n")

        with pytest.raises(PydanticValidationError):
            Config.load(config_path)

    def test_home_relative_storage(self):
        config = Config(storage_path=Path("~/.ghostly-test"))

        assert config.memory_file == Path.home() / ".ghostly-test" / "memory.json"
