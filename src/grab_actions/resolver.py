"""Resolution of the active captures directory."""

import logging
from pathlib import Path

from .errors import AppSupportError, CaptureNotFoundError, GrabError
from .settings import SettingsStore

logger = logging.getLogger(__name__)


def resolve_captures_dir(store: SettingsStore) -> Path:
    """Return the directory captures should be read from.

    The configured folder wins while it exists. Otherwise (folder gone, or
    settings unreadable) the platform default is used and created. Settings
    are never rewritten here, so a temporarily unmounted folder stays
    configured.

    Args:
        store: Settings store to read the configured folder from

    Returns:
        Path to an existing captures directory
    """
    try:
        settings = store.load()
    except GrabError as e:
        logger.warning(f"Failed to load settings, using default captures directory: {e}")
    else:
        configured = Path(settings.capture_folder)
        if configured.is_dir():
            return configured
        logger.warning(f"Configured capture folder {configured} is missing, using default")

    try:
        return store.paths.ensure_default_captures_dir()
    except OSError as e:
        raise AppSupportError(f"Failed to create default captures directory: {e}") from e


def resolve_artifact_path(store: SettingsStore, filename: str, kind: str = "Capture") -> Path:
    """Resolve a bare artifact file name inside the captures directory.

    Args:
        store: Settings store used for directory resolution
        filename: Artifact file name as listed by the registry
        kind: Label used in the not-found message (e.g. "Text", "Image")

    Returns:
        Path to the existing artifact

    Raises:
        CaptureNotFoundError: If the name is not a plain file name or the
            file does not exist
    """
    if not filename or Path(filename).name != filename or filename in (".", ".."):
        raise CaptureNotFoundError(f"{kind} file not found: {filename!r}")

    path = resolve_captures_dir(store) / filename
    if not path.exists():
        raise CaptureNotFoundError(f"{kind} file not found: {filename}")
    return path
