"""Loading of sidecar metadata files."""

from pathlib import Path

from pydantic import ValidationError

from .errors import CaptureNotFoundError, MetadataError
from .models.capture import CaptureMetadata
from .resolver import resolve_captures_dir
from .settings import SettingsStore

SIDECAR_SUFFIX = ".json"


def sidecar_path(captures_dir: Path, filename: str) -> Path:
    """Return the sidecar path for an artifact (<filename>.json)."""
    return captures_dir / f"{filename}{SIDECAR_SUFFIX}"


def load_capture_metadata(path: Path) -> CaptureMetadata:
    """Read and validate one sidecar file.

    Required fields must be present; every detail field is optional.

    Raises:
        MetadataError: If the file cannot be read or does not match the schema
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataError(f"Failed to read metadata file: {e}") from e

    try:
        return CaptureMetadata.model_validate_json(content)
    except ValidationError as e:
        raise MetadataError(f"Failed to parse metadata: {e}") from e


def get_capture_metadata(store: SettingsStore, filename: str) -> CaptureMetadata:
    """Load the sidecar for a named artifact in the active captures directory.

    Raises:
        CaptureNotFoundError: If no sidecar exists for the artifact
        MetadataError: If the sidecar cannot be parsed
    """
    path = sidecar_path(resolve_captures_dir(store), filename)
    if Path(filename).name != filename or not path.exists():
        raise CaptureNotFoundError(f"Metadata file not found: {filename}")
    return load_capture_metadata(path)
