"""
Configuration loader for YAML files.

Reads an optional override file and validates it against SetupConfig.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from .models import SetupConfig

logger = logging.getLogger(__name__)

CONFIG_ENV = "SETUPCHECK_CONFIG"


class ConfigError(Exception):
    """Configuration loading or validation error."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from a YAML file.

    The file is optional: without one, the built-in defaults are used.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the config loader.

        Args:
            config_path: Path to config file; falls back to $SETUPCHECK_CONFIG
            env: Environment to read the fallback from (defaults to os.environ)
        """
        env = os.environ if env is None else env
        if config_path is None and env.get(CONFIG_ENV):
            config_path = env[CONFIG_ENV]
        self.config_path = Path(config_path) if config_path else None

    def load(self) -> SetupConfig:
        """
        Load the configuration.

        Returns:
            Validated configuration, defaults when no file is set

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if self.config_path is None:
            return SetupConfig()

        if not self.config_path.is_file():
            raise ConfigError(f"Configuration file does not exist: {self.config_path}")

        logger.debug("Loading configuration from %s", self.config_path)
        return self._parse(self._read_yaml(self.config_path))

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {file_path}")
        return data

    def _parse(self, data: Dict[str, Any]) -> SetupConfig:
        """Validate raw data against the schema."""
        try:
            return SetupConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}")
