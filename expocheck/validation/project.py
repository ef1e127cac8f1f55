"""
Project File Access

Read-only, lazily cached view of the project being validated.
"""

import json
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union


class ManifestError(Exception):
    """Manifest could not be read or is not a JSON object."""
    pass


class ProjectFiles:
    """
    Lazy reader for files under a project root.

    Files are read on first use and cached for the lifetime of the
    instance, which is a single validation run. Nothing is ever written.
    """

    def __init__(self, root: Union[str, Path], manifest_name: str = "package.json"):
        self.root = Path(root)
        self.manifest_name = manifest_name
        self._text: Dict[str, str] = {}
        self._manifest: Optional[Dict[str, Any]] = None
        self._lock = threading.Lock()

    def path(self, relative: str) -> Path:
        return self.root / relative

    def is_file(self, relative: str) -> bool:
        return self.path(relative).is_file()

    def is_dir(self, relative: str) -> bool:
        return self.path(relative).is_dir()

    def read_text(self, relative: str) -> str:
        """Read a file relative to the root, caching its contents."""
        with self._lock:
            if relative not in self._text:
                self._text[relative] = self.path(relative).read_text(
                    encoding="utf-8", errors="replace"
                )
            return self._text[relative]

    def contains(self, relative: str, needle: str) -> bool:
        """Literal substring search, like `grep -q` with a fixed string."""
        return needle in self.read_text(relative)

    def manifest(self) -> Dict[str, Any]:
        """
        Parse the manifest as JSON.

        Raises:
            ManifestError: If the file is unreadable, malformed, or not an object
        """
        if self._manifest is not None:
            return self._manifest

        try:
            data = json.loads(self.read_text(self.manifest_name))
        except OSError as e:
            raise ManifestError(f"Cannot read {self.manifest_name}: {e}") from e
        except json.JSONDecodeError as e:
            raise ManifestError(f"Invalid JSON in {self.manifest_name}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestError(f"{self.manifest_name} is not a JSON object")

        self._manifest = data
        return data

    def dependency_section(self, section: str) -> Dict[str, Any]:
        """Get a dependency mapping from the manifest, empty if absent."""
        value = self.manifest().get(section)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ManifestError(f"'{section}' in {self.manifest_name} is not an object")
        return value


def first_existing(project: ProjectFiles, candidates: Iterable[str]) -> Optional[str]:
    """Return the first candidate that is a regular file, or None."""
    for candidate in candidates:
        if project.is_file(candidate):
            return candidate
    return None
