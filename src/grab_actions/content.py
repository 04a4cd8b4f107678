"""Content access for individual captures."""

import base64
import shutil
from pathlib import Path

from .errors import CaptureReadError
from .resolver import resolve_artifact_path
from .settings import SettingsStore


def export_target(downloads_dir: Path, source: Path) -> Path:
    """Pick the path an exported capture is written to.

    Keeps the capture's name when it is free in downloads_dir, otherwise
    appends _1, _2, ... before the extension, the way browsers name
    repeated downloads.
    """
    target = downloads_dir / source.name
    copies = 0
    while target.exists():
        copies += 1
        target = downloads_dir / f"{source.stem}_{copies}{source.suffix}"
    return target


def read_text_content(store: SettingsStore, filename: str) -> str:
    """Return the full text of a text capture.

    Raises:
        CaptureNotFoundError: If the file does not exist
        CaptureReadError: If the file cannot be read as UTF-8 text
    """
    path = resolve_artifact_path(store, filename, kind="Text")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CaptureReadError(f"Failed to read text file: {e}") from e


def read_image_content(store: SettingsStore, filename: str) -> str:
    """Return the bytes of a capture as standard base64 text.

    Raises:
        CaptureNotFoundError: If the file does not exist
        CaptureReadError: If the file cannot be read
    """
    path = resolve_artifact_path(store, filename, kind="Image")
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CaptureReadError(f"Failed to read image file: {e}") from e
    return base64.b64encode(data).decode("ascii")


def save_capture_to_downloads(store: SettingsStore, filename: str, downloads_dir: Path) -> Path:
    """Copy a capture into the downloads folder without overwriting.

    Args:
        store: Settings store used to resolve the captures directory
        filename: Artifact file name
        downloads_dir: Destination folder (created if missing)

    Returns:
        Path of the written copy

    Raises:
        CaptureNotFoundError: If the file does not exist
        CaptureReadError: If the copy fails
    """
    source = resolve_artifact_path(store, filename)
    try:
        downloads_dir.mkdir(parents=True, exist_ok=True)
        target = export_target(downloads_dir, source)
        shutil.copy2(source, target)
    except OSError as e:
        raise CaptureReadError(f"Failed to save capture to downloads: {e}") from e
    return target
