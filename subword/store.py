"""Settings file persistence."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

# Overridable so tests never touch the real home directory
CONFIG_DIR = Path(os.environ.get("SUBWORD_CONFIG_DIR", Path.home() / ".subword"))


class SettingsError(Exception):
    """Exception raised when the settings file cannot be read or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot use settings file {path}: {reason}")


def default_settings_path() -> Path:
    """Settings path for this process: SUBWORD_SETTINGS_PATH, else CONFIG_DIR/settings.json."""
    override = os.environ.get("SUBWORD_SETTINGS_PATH")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


class SettingsStore:
    """Reads and writes the settings JSON object.

    A missing file, malformed JSON or a non-object document all load as an
    empty dict. A path that exists but cannot be opened (a directory, no
    permission) raises SettingsError.
    """

    def __init__(self, file_path: Path | None = None) -> None:
        self._file_path = file_path if file_path is not None else default_settings_path()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        return self._file_path.exists()

    def load(self) -> dict[str, Any]:
        """Load the saved settings."""
        if not self._file_path.exists():
            return {}
        try:
            with open(self._file_path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
            return {}
        except OSError as exc:
            raise SettingsError(self._file_path, exc.strerror or str(exc)) from exc
        return data if isinstance(data, dict) else {}

    def save(self, settings: dict[str, Any]) -> None:
        """Replace the saved settings.

        The file is written next to its final location and renamed into
        place, owner-only (0600), inside an owner-only directory.
        """
        directory = self._file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            try:
                os.chmod(directory, 0o700)
            except OSError:
                pass  # Not supported on every platform
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp_", suffix=".json")
        except OSError as exc:
            raise SettingsError(self._file_path, exc.strerror or str(exc)) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=2)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise SettingsError(self._file_path, exc.strerror or str(exc)) from exc
