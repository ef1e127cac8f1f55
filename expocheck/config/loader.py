"""
Profile loader for YAML files.

Handles discovery, loading, and merging of validation profiles.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .defaults import PROFILE_FILENAMES, get_default_profile
from .models import ValidationProfile

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Profile loading or validation error."""
    pass


class ConfigLoader:
    """
    Loads a validation profile.

    An explicit profile file wins; otherwise a profile file in the
    project root is used if present. Keys in the file override the
    built-in defaults one top-level key at a time.
    """

    def __init__(
        self,
        project_root: Optional[Union[str, Path]] = None,
        profile_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the loader.

        Args:
            project_root: Project directory searched for a profile file
            profile_path: Explicit profile file, takes precedence
        """
        self.project_root = Path(project_root) if project_root else None
        self.profile_path = Path(profile_path) if profile_path else None
        self.source: Optional[Path] = None
        self._profile: Optional[ValidationProfile] = None

    def load(self) -> "ConfigLoader":
        """
        Load the effective profile.

        Returns:
            Self for method chaining

        Raises:
            ConfigError: If the profile file is unreadable or invalid
        """
        data = get_default_profile()

        source = self._find_profile_file()
        if source is not None:
            overrides = self._read_yaml(source)
            logger.debug("Loaded profile overrides from %s: %s", source, sorted(overrides))
            data.update(overrides)
            self.source = source

        self._profile = self._parse_profile(data, source)
        return self

    def _find_profile_file(self) -> Optional[Path]:
        if self.profile_path is not None:
            if not self.profile_path.is_file():
                raise ConfigError(f"Profile file does not exist: {self.profile_path}")
            return self.profile_path

        if self.project_root is None:
            return None

        for filename in PROFILE_FILENAMES:
            candidate = self.project_root / filename
            if candidate.is_file():
                return candidate
        return None

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML mapping."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Profile in {file_path} must be a mapping")
        return data

    def _parse_profile(self, data: Dict[str, Any], source: Optional[Path]) -> ValidationProfile:
        try:
            return ValidationProfile(**data)
        except ValidationError as e:
            origin = source or "built-in defaults"
            raise ConfigError(f"Invalid profile ({origin}): {e}")

    @property
    def profile(self) -> ValidationProfile:
        """Get the loaded profile, loading it on first access."""
        if self._profile is None:
            self.load()
        return self._profile

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, Any]] = None) -> ValidationProfile:
        """
        Build a profile from in-memory overrides on top of the defaults.

        Raises:
            ConfigError: If the merged profile is invalid
        """
        data = get_default_profile()
        data.update(overrides or {})
        return cls()._parse_profile(data, None)


def load_profile(
    project_root: Optional[Union[str, Path]] = None,
    profile_path: Optional[Union[str, Path]] = None,
) -> ValidationProfile:
    """Convenience wrapper: discover and load the effective profile."""
    return ConfigLoader(project_root, profile_path).load().profile
