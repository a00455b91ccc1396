"""
Configuration management for Ghostly.

Handles loading and persisting configuration from YAML files.
Default location: ~/.ghostly/config.yaml
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def get_default_storage_path() -> Path:
    """Get the default storage path for Ghostly."""
    return Path.home() / ".ghostly"


class Config(BaseSettings):
    """Ghostly configuration settings."""

    # Storage settings
    storage_path: Path = Field(default_factory=get_default_storage_path)

    # Recall settings
    max_results: int = Field(default=10, ge=1, le=100)

    # Hash the resolved project path instead of the raw one
    normalize_project_paths: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    class Config:
        env_prefix = "GHOSTLY_"
        env_file = ".env"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file."""
        if config_path is None:
            config_path = get_default_storage_path() / "config.yaml"

        if config_path.exists():
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)

        return cls()

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = self.storage_path / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "storage_path": str(self.storage_path),
            "max_results": self.max_results,
            "normalize_project_paths": self.normalize_project_paths,
            "log_level": self.log_level,
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)

    @property
    def memory_file(self) -> Path:
        """Get the JSON memory file path."""
        return self.storage_path.expanduser() / "memory.json"
