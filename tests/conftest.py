"""
Test fixtures for the Expo setup validator.

Provides a factory that lays out a throwaway Expo project under tmp_path,
complete by default, with hooks to remove or rewrite individual pieces.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

from expocheck.validation import ConfigValidator


def default_manifest() -> Dict[str, Any]:
    """A package.json that satisfies every manifest check."""
    return {
        "name": "starter",
        "main": "expo-router/entry",
        "dependencies": {
            "expo": "~52.0.0",
            "expo-router": "~4.0.0",
            "react": "^18.3.1",
            "react-dom": "18.3.1",
            "react-native": "0.76.3",
            "react-native-web": "~0.19.13",
            "nativewind": "^4.1.23",
            "zustand": "^5.0.1",
            "expo-sqlite": "~15.0.3",
        },
        "devDependencies": {
            "typescript": "^5.3.3",
        },
    }


DEFAULT_FILES = {
    "app.json": json.dumps(
        {"expo": {"name": "starter", "web": {"bundler": "metro"}, "plugins": ["expo-router"]}},
        indent=2,
    ),
    "tailwind.config.js": (
        'module.exports = {\n  presets: [require("nativewind/preset")],\n};\n'
    ),
    "babel.config.js": "module.exports = {};\n",
    "metro.config.js": "module.exports = {};\n",
    "global.css": "@tailwind base;\n",
    "tsconfig.json": "{}\n",
    "nativewind-env.d.ts": '/// <reference types="nativewind/types" />\n',
    "src/app/_layout.tsx": 'import "../../global.css";\nexport default function Layout() {}\n',
    "src/app/index.tsx": "export default function Index() {}\n",
}


def write_project(
    root: Path,
    manifest: Optional[Dict[str, Any]] = None,
    files: Optional[Dict[str, Optional[str]]] = None,
    with_manifest: bool = True,
) -> Path:
    """
    Write a project tree.

    `files` entries are merged over DEFAULT_FILES; a value of None drops
    the file from the tree.
    """
    root.mkdir(parents=True, exist_ok=True)

    if with_manifest:
        data = manifest if manifest is not None else default_manifest()
        (root / "package.json").write_text(json.dumps(data, indent=2))

    layout = dict(DEFAULT_FILES)
    layout.update(files or {})

    for relative, content in layout.items():
        if content is None:
            continue
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    return root


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: make_project(manifest=..., files=...) -> project root."""
    counter = {"n": 0}

    def factory(**kwargs: Any) -> Path:
        counter["n"] += 1
        return write_project(tmp_path / f"project{counter['n']}", **kwargs)

    return factory


@pytest.fixture
def validator() -> ConfigValidator:
    """Validator with the built-in Expo starter profile."""
    return ConfigValidator()


def result_ids(report, outcome=None):
    """Ids of report entries, optionally filtered by outcome."""
    return [r.check_id for r in report.results if outcome is None or r.outcome == outcome]
