"""User settings storage."""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class UserSettings:
    """User-configurable settings for Vaultree."""

    inclusions: list[str] = field(default_factory=list)
    exclusions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "UserSettings":
        return cls(
            inclusions=list(data.get("inclusions", [])),
            exclusions=list(data.get("exclusions", [])),
        )


class SettingsStorage:
    """Manages user settings stored in .vaultree/settings.json."""

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path
        self.settings_dir = vault_path / ".vaultree"
        self.settings_file = self.settings_dir / "settings.json"
        self._settings: UserSettings | None = None

    def get(self) -> UserSettings:
        """Get current settings, loading from disk or creating defaults."""
        if self._settings is None:
            self._settings = self._load()
        return self._settings

    def update(self, **kwargs) -> UserSettings:
        """Update specific settings and save to disk."""
        settings = self.get()

        # Update only provided fields
        for key, value in kwargs.items():
            if hasattr(settings, key):
                setattr(settings, key, value)

        self._save(settings)
        self._settings = settings
        return settings

    def _load(self) -> UserSettings:
        """Load settings from disk, creating defaults if missing."""
        if not self.settings_file.exists():
            settings = UserSettings()
            self._save(settings)
            return settings

        try:
            data = json.loads(self.settings_file.read_text(encoding="utf-8"))
            return UserSettings.from_dict(data)
        except (json.JSONDecodeError, OSError, AttributeError, TypeError) as e:
            logger.warning(f"Failed to load settings, using defaults: {e}")
            return UserSettings()

    def _save(self, settings: UserSettings) -> None:
        """Save settings to disk."""
        try:
            self.settings_dir.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(
                json.dumps(settings.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
