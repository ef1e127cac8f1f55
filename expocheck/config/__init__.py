"""Validation profile handling."""

from .models import (
    ValidationProfile,
    VersionPairConfig,
    SettingConfig,
    OptionalFileConfig,
    PresetConfig,
    LayoutConfig,
)
from .loader import ConfigLoader, ConfigError, load_profile
from .defaults import get_default_profile

__all__ = [
    "ValidationProfile",
    "VersionPairConfig",
    "SettingConfig",
    "OptionalFileConfig",
    "PresetConfig",
    "LayoutConfig",
    "ConfigLoader",
    "ConfigError",
    "load_profile",
    "get_default_profile",
]
