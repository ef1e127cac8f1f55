"""Read-only setup validator for Expo + React Native + TypeScript projects."""

__version__ = "1.0.0"
