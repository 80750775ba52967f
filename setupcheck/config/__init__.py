"""Configuration handling for the setup checker."""

from .models import ExtensionRequirement, SetupConfig
from .loader import ConfigError, ConfigLoader

__all__ = [
    "ExtensionRequirement",
    "SetupConfig",
    "ConfigError",
    "ConfigLoader",
]
