"""
Default validation profile.

Matches the Expo + React Native + TypeScript + NativeWind starter layout.
"""

from typing import Any, Dict


def get_default_profile() -> Dict[str, Any]:
    """Get the Expo starter profile as raw configuration data."""
    return {
        "name": "expo-starter",
        "manifest": "package.json",
        "entry_point": "expo-router/entry",
        "required_dependencies": [
            "expo",
            "expo-router",
            "react",
            "react-native",
            "nativewind",
        ],
        "optional_dependencies": [
            "react-dom",
            "react-native-web",
            "zustand",
            "expo-sqlite",
        ],
        "version_pair": {
            "primary": "react",
            "secondary": "react-dom",
            "secondary_hint": "needed for web",
        },
        "settings_file": "app.json",
        "settings": [
            {
                "key": "bundler",
                "needle": '"bundler": "metro"',
                "severity": "optional",
                "description": "Web bundler set to 'metro'",
                "missing_hint": "Web bundler not configured (needed for web)",
            },
            {
                "key": "expo-router",
                "needle": '"expo-router"',
                "severity": "required",
                "description": "expo-router plugin configured",
                "missing_hint": "expo-router plugin missing from app.json",
            },
        ],
        "required_files": [
            "tailwind.config.js",
            "babel.config.js",
            "metro.config.js",
            "global.css",
            "tsconfig.json",
        ],
        "optional_files": [
            {
                "path": "nativewind-env.d.ts",
                "hint": "TypeScript NativeWind support",
            },
        ],
        "preset": {
            "file": "tailwind.config.js",
            "needle": "nativewind/preset",
            "label": "NativeWind preset",
        },
        "layout": {
            "preferred": "src/app",
            "fallback": "app",
            "required_files": ["_layout.tsx", "index.tsx"],
            "entry_file": "_layout.tsx",
            "import_needle": "global.css",
        },
    }


PROFILE_FILENAMES = [".expocheck.yaml", ".expocheck.yml"]
