"""Tests for the settings store and captures directory resolution."""

import json

import pytest

from grab_actions.errors import CaptureNotFoundError, SettingsError
from grab_actions.models.settings import AppSettings
from grab_actions.registry import list_captures
from grab_actions.resolver import resolve_artifact_path, resolve_captures_dir


def test_load_creates_defaults_on_first_run(store, app_paths):
    """First load writes settings with both folders set to the default dir."""
    assert not app_paths.settings_file.exists()

    settings = store.load()

    assert settings.capture_folder == str(app_paths.default_captures_dir)
    assert settings.default_capture_folder == settings.capture_folder
    assert app_paths.default_captures_dir.is_dir()

    on_disk = json.loads(app_paths.settings_file.read_text())
    assert on_disk == {
        "capture_folder": str(app_paths.default_captures_dir),
        "default_capture_folder": str(app_paths.default_captures_dir),
    }


def test_save_then_load_round_trips(store, tmp_path):
    custom = tmp_path / "custom_captures"
    record = AppSettings(capture_folder=str(custom), default_capture_folder="/somewhere/default")

    store.save(record)

    assert store.load() == record
    assert custom.is_dir()


def test_corrupt_settings_raise(store, app_paths):
    """A corrupt settings file is surfaced, never silently reset."""
    app_paths.settings_file.write_text("{not json")

    with pytest.raises(SettingsError, match="Failed to parse settings"):
        store.load()

    assert app_paths.settings_file.read_text() == "{not json"


def test_settings_missing_field_raise(store, app_paths):
    app_paths.settings_file.write_text(json.dumps({"capture_folder": "/x"}))

    with pytest.raises(SettingsError):
        store.load()


def test_load_accepts_camel_case_keys(store, app_paths):
    """Settings written by the native app use camelCase keys."""
    app_paths.settings_file.write_text(
        json.dumps({"captureFolder": "/a/captures", "defaultCaptureFolder": "/b/captures"})
    )

    settings = store.load()

    assert settings.capture_folder == "/a/captures"
    assert settings.default_capture_folder == "/b/captures"


def test_reset_restores_default_folder(store, tmp_path):
    default = store.load().default_capture_folder
    store.save(AppSettings(capture_folder=str(tmp_path / "elsewhere"), default_capture_folder=default))

    settings = store.reset()

    assert settings.capture_folder == default
    assert store.load().capture_folder == default


def test_resolve_prefers_configured_folder(store, tmp_path):
    custom = tmp_path / "custom"
    store.save(AppSettings(capture_folder=str(custom), default_capture_folder=str(tmp_path / "d")))

    assert resolve_captures_dir(store) == custom


def test_resolve_falls_back_without_rewriting_settings(store, app_paths, tmp_path):
    """A deleted capture folder falls back to the default but stays configured."""
    custom = tmp_path / "removable_drive" / "captures"
    store.save(AppSettings(capture_folder=str(custom), default_capture_folder=str(app_paths.default_captures_dir)))
    custom.rmdir()

    resolved = resolve_captures_dir(store)

    assert resolved == app_paths.default_captures_dir
    assert resolved.is_dir()
    assert store.load().capture_folder == str(custom)


def test_resolve_falls_back_on_corrupt_settings(store, app_paths):
    app_paths.settings_file.write_text("][")

    assert resolve_captures_dir(store) == app_paths.default_captures_dir
    assert app_paths.settings_file.read_text() == "]["


def test_non_utf8_settings_raise_settings_error(store, app_paths):
    app_paths.settings_file.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(SettingsError, match="Failed to read settings file"):
        store.load()


def test_resolve_falls_back_on_non_utf8_settings(store, app_paths):
    """Undecodable settings are absorbed during resolution like corrupt JSON."""
    app_paths.settings_file.write_bytes(b"\xff\xfe\x00")

    assert resolve_captures_dir(store) == app_paths.default_captures_dir
    assert list_captures(store) == []
    assert app_paths.settings_file.read_bytes() == b"\xff\xfe\x00"


def test_resolve_artifact_path(store, captures_dir):
    (captures_dir / "note.txt").write_text("hi")

    assert resolve_artifact_path(store, "note.txt") == captures_dir / "note.txt"

    with pytest.raises(CaptureNotFoundError, match="Text file not found"):
        resolve_artifact_path(store, "missing.txt", kind="Text")


@pytest.mark.parametrize("name", ["", ".", "..", "../settings.json", "sub/note.txt"])
def test_resolve_artifact_path_rejects_non_file_names(store, captures_dir, name):
    with pytest.raises(CaptureNotFoundError):
        resolve_artifact_path(store, name)
