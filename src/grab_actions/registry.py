"""Capture registry: scans the captures directory and correlates sidecars."""

import logging
from pathlib import Path
from typing import Optional

from .errors import CaptureReadError, MetadataError, ScanError
from .metadata import load_capture_metadata, sidecar_path
from .models.capture import CaptureEntry, CaptureType
from .resolver import resolve_artifact_path, resolve_captures_dir
from .settings import SettingsStore

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"})
TEXT_EXTENSIONS = frozenset({".txt"})


def classify_capture(filename: str) -> Optional[CaptureType]:
    """Classify an artifact by extension (case-insensitive).

    Returns:
        "image", "text", or None for files that are not captures
    """
    ext_lower = Path(filename).suffix.lower()

    if ext_lower in IMAGE_EXTENSIONS:
        return "image"
    elif ext_lower in TEXT_EXTENSIONS:
        return "text"
    return None


def list_captures(store: SettingsStore) -> list[CaptureEntry]:
    """List all captures in the active captures directory, newest first.

    A sidecar that cannot be loaded leaves the entry in place with
    has_metadata=True and metadata=None.

    Args:
        store: Settings store used to resolve the directory

    Returns:
        Capture entries sorted by modification time, descending

    Raises:
        ScanError: If the directory or a capture's file status cannot be read
    """
    captures_dir = resolve_captures_dir(store)
    if not captures_dir.exists():
        return []

    try:
        children = list(captures_dir.iterdir())
    except OSError as e:
        raise ScanError(f"Failed to read captures directory: {e}") from e

    captures: list[CaptureEntry] = []
    for path in children:
        if not path.is_file():
            continue

        capture_type = classify_capture(path.name)
        if capture_type is None:
            continue

        try:
            stat = path.stat()
        except OSError as e:
            raise ScanError(f"Failed to read file metadata for {path.name}: {e}") from e

        json_path = sidecar_path(captures_dir, path.name)
        has_metadata = json_path.exists()
        metadata = None
        if has_metadata:
            try:
                metadata = load_capture_metadata(json_path)
            except MetadataError as e:
                logger.warning(f"Ignoring metadata for {path.name}: {e}")

        captures.append(
            CaptureEntry(
                name=path.name,
                path=str(path.absolute()),
                modified=int(stat.st_mtime),
                size=stat.st_size,
                capture_type=capture_type,
                has_metadata=has_metadata,
                metadata=metadata,
            )
        )

    captures.sort(key=lambda c: c.modified, reverse=True)
    return captures


def find_capture(store: SettingsStore, capture_id: str) -> Optional[CaptureEntry]:
    """Find the capture a launch-supplied capture identifier refers to.

    An exact sidecar id match wins; otherwise the newest capture whose file
    name contains the identifier is returned.
    """
    if not capture_id:
        return None

    captures = list_captures(store)
    for entry in captures:
        if entry.metadata is not None and entry.metadata.id == capture_id:
            return entry
    for entry in captures:
        if capture_id in entry.name:
            return entry

    logger.info(f"No capture found for id {capture_id}")
    return None


def delete_capture(store: SettingsStore, filename: str) -> list[Path]:
    """Delete an artifact and its sidecar, if any.

    Returns:
        The paths that were removed

    Raises:
        CaptureNotFoundError: If the artifact does not exist
        CaptureReadError: If a file could not be removed
    """
    path = resolve_artifact_path(store, filename)
    removed = []
    for target in (path, sidecar_path(path.parent, filename)):
        if not target.exists():
            continue
        try:
            target.unlink()
        except OSError as e:
            raise CaptureReadError(f"Failed to delete {target.name}: {e}") from e
        removed.append(target)

    logger.info(f"Deleted capture {filename}")
    return removed
