"""Persistent storage for user settings."""

from .settings import SettingsStorage, UserSettings

__all__ = [
    "SettingsStorage",
    "UserSettings",
]
