"""Configuration loader for application settings."""

import os
from pathlib import Path
from typing import Any

import yaml

from ..utils.logging import get_logger
from .models import Settings

logger = get_logger(__name__)

ENV_PREFIX = "COFLOWCODE_"
ENV_KEYS = ("data_dir", "store_file", "prompts_dir", "log_level", "log_file")


class ConfigLoader:
    """Loads settings from an optional YAML file and the environment."""

    def __init__(self, config_dir: Path | None = None):
        """Initialize the config loader.

        Args:
            config_dir: Directory containing config files. Defaults to the
                current working directory
        """
        self.config_dir = config_dir or Path.cwd()

    def load_settings(
        self,
        settings_file: str | Path | None = None,
        environ: dict[str, str] | None = None,
    ) -> Settings:
        """Load settings.

        Values from *settings_file* are overridden by ``COFLOWCODE_*``
        environment variables.

        Args:
            settings_file: Path to a YAML settings file, optional
            environ: Environment mapping, defaults to ``os.environ``

        Returns:
            Parsed Settings object
        """
        data: dict[str, Any] = {}
        if settings_file is not None:
            path = self._resolve_path(settings_file)
            data.update(self._load_yaml(path))

        env = os.environ if environ is None else environ
        for key in ENV_KEYS:
            value = env.get(ENV_PREFIX + key.upper())
            if value:
                data[key] = value

        return Settings.from_dict(data)

    def _resolve_path(self, file_path: str | Path) -> Path:
        """Resolve a config file path."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self.config_dir / path
        return path

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load and parse a YAML file."""
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

        logger.debug(f"Loaded settings from {path}")
        return data
