"""Configuration for the subword CLI.

Settings are read from a JSON file (see ``store.SettingsStore``). Values that
are missing or have the wrong type fall back to the defaults; unknown keys
are left untouched on save.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .store import SettingsStore

OUTPUT_FORMATS = ("table", "json", "csv")

SETTING_KEYS = ("default_count", "default_format", "highlight_styles")

DEFAULT_HIGHLIGHT_STYLES = ["bold cyan", "bold magenta", "bold green", "bold yellow"]


@dataclass
class Settings:
    """User settings for the CLI."""

    default_count: int = 1
    default_format: str = "table"
    highlight_styles: list[str] = field(default_factory=lambda: list(DEFAULT_HIGHLIGHT_STYLES))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """Build settings from raw JSON data, ignoring invalid values."""
        settings = cls()

        count = data.get("default_count")
        if isinstance(count, int) and not isinstance(count, bool) and count >= 1:
            settings.default_count = count

        fmt = data.get("default_format")
        if isinstance(fmt, str) and fmt in OUTPUT_FORMATS:
            settings.default_format = fmt

        styles = data.get("highlight_styles")
        if isinstance(styles, list):
            cleaned = [s.strip() for s in styles if isinstance(s, str) and s.strip()]
            if cleaned:
                settings.highlight_styles = cleaned

        return settings

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_count": self.default_count,
            "default_format": self.default_format,
            "highlight_styles": list(self.highlight_styles),
        }


def load_settings() -> dict:
    """Load raw app settings from the settings file."""
    return SettingsStore().load()


def get_settings() -> Settings:
    """Load typed settings with defaults applied."""
    return Settings.from_dict(load_settings())


def update_settings(settings: Settings) -> None:
    """Persist typed settings, preserving keys this version does not know."""
    store = SettingsStore()
    raw = store.load()
    raw.update(settings.to_dict())
    store.save(raw)


def parse_setting(key: str, value: str) -> Any:
    """Convert a command-line string into the typed value for a setting.

    Raises:
        ValueError: If key is unknown or value is not valid for it.
    """
    if key == "default_count":
        try:
            count = int(value)
        except ValueError:
            raise ValueError(f"default_count must be an integer, got '{value}'")
        if count < 1:
            raise ValueError(f"default_count must be >= 1, got {count}")
        return count
    if key == "default_format":
        if value not in OUTPUT_FORMATS:
            raise ValueError(f"default_format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return value
    if key == "highlight_styles":
        styles = [s.strip() for s in value.split(",") if s.strip()]
        if not styles:
            raise ValueError("highlight_styles needs at least one style")
        return styles
    raise ValueError(f"Unknown setting '{key}' (known: {', '.join(SETTING_KEYS)})")


def set_setting(key: str, value: str) -> Settings:
    """Parse, apply and persist a single setting. Returns the updated settings."""
    parsed = parse_setting(key, value)
    settings = get_settings()
    setattr(settings, key, parsed)
    update_settings(settings)
    return settings
