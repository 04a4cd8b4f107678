"""Pytest fixtures for Grab Actions tests."""

import json
import os
from pathlib import Path

import pytest

from grab_actions.config import GrabConfig
from grab_actions.paths import AppPaths
from grab_actions.settings import SettingsStore


@pytest.fixture
def app_support(tmp_path):
    """Create a temporary application-support root.

    Args:
        tmp_path: pytest's built-in temporary directory fixture

    Returns:
        Path to the application-support root
    """
    root = tmp_path / "app_support"
    root.mkdir()
    return root


@pytest.fixture
def grab_config(app_support, tmp_path):
    """Create a GrabConfig pointing at the temporary root."""
    return GrabConfig(
        app_support_dir=app_support,
        downloads_dir=tmp_path / "downloads",
        clipboard_backend="fake",
    )


@pytest.fixture
def app_paths(grab_config):
    return AppPaths.from_config(grab_config)


@pytest.fixture
def store(app_paths):
    return SettingsStore(app_paths)


@pytest.fixture
def captures_dir(store):
    """Active captures directory (first-run default)."""
    return Path(store.load().capture_folder)


@pytest.fixture
def make_capture(captures_dir):
    """Factory writing an artifact (and optional sidecar) into the captures dir.

    Returns:
        Callable(name, content=b"", mtime=None, sidecar=None) -> Path
    """

    def _make(name, content=b"", mtime=None, sidecar=None):
        path = captures_dir / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        if sidecar is not None:
            sidecar_file = captures_dir / f"{name}.json"
            if isinstance(sidecar, str):
                sidecar_file.write_text(sidecar, encoding="utf-8")
            else:
                sidecar_file.write_text(json.dumps(sidecar), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def sample_metadata():
    """A valid sidecar record without dimensions."""
    return {
        "id": "abc123",
        "timestamp": "2025-06-01T10:00:00Z",
        "type": "screenshot",
        "filename": "shot.png",
        "fileExtension": "png",
        "fileSize": 2048,
        "metadata": {
            "applicationName": "Safari",
            "windowTitle": "Example Domain",
        },
    }
