"""Pytest fixtures for subword tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="subword-test-config-"))
os.environ.setdefault("SUBWORD_CONFIG_DIR", str(_TEST_CONFIG_DIR))

_CLI_ENV_VARS = ("SUBWORD_SETTINGS_PATH", "SUBWORD_DEBUG")


@pytest.fixture(autouse=True)
def _reset_cli_environment():
    """Ensure settings overrides and debug flags do not leak between tests."""
    for name in _CLI_ENV_VARS:
        os.environ.pop(name, None)
    yield
    for name in _CLI_ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def settings_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings store at a fresh file under tmp_path."""
    path = tmp_path / "settings.json"
    monkeypatch.setenv("SUBWORD_SETTINGS_PATH", str(path))
    return path
