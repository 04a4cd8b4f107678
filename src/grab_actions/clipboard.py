"""Clipboard bridge: the one-shot clipboard event file and image copy.

The native capture app writes clipboard_event.json whenever it sees new
clipboard content. The file is a single-slot mailbox: a poll reads it and
deletes it. A write that lands between the read and the delete is lost.
"""

import json
import logging
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from .config import GrabConfig
from .errors import ClipboardError, ClipboardEventError
from .registry import classify_capture
from .resolver import resolve_artifact_path
from .settings import SettingsStore

logger = logging.getLogger(__name__)


class ClipboardEventMailbox:
    """Single-slot, file-backed clipboard event."""

    def __init__(self, event_file: Path):
        self.event_file = event_file

    def poll(self) -> Optional[Any]:
        """Consume the pending event.

        Returns:
            The parsed JSON payload, or None if no event is pending

        Raises:
            ClipboardEventError: If the pending file cannot be read or parsed.
                The file is still consumed so the next poll is clean.
        """
        if not self.event_file.exists():
            return None

        try:
            content = self.event_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise ClipboardEventError(f"Failed to read clipboard event: {e}") from e

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            self._discard()
            raise ClipboardEventError(f"Failed to parse clipboard event: {e}") from e

        self._discard()
        return payload

    def _discard(self) -> None:
        try:
            self.event_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove clipboard event file {self.event_file}: {e}")


class ClipboardBackend(ABC):
    """Sets the system clipboard to an image file."""

    @abstractmethod
    def set_image(self, path: Path) -> None:
        """Place the image at path on the system clipboard.

        Raises:
            ClipboardError: If the platform call fails
        """
        pass

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Return backend identifier (e.g., 'osascript', 'fake')."""
        pass


# AppleScript picture classes by extension; anything else is read as TIFF.
_APPLESCRIPT_CLASSES = {
    ".png": "«class PNGf»",
    ".jpg": "«class JPEG»",
    ".jpeg": "«class JPEG»",
    ".gif": "«class GIFf»",
}


class OsaScriptClipboardBackend(ClipboardBackend):
    """macOS backend that shells out to osascript."""

    def __init__(self, executable: str = "osascript"):
        self.executable = executable

    @property
    def backend_name(self) -> str:
        return "osascript"

    def build_script(self, path: Path) -> str:
        picture_class = _APPLESCRIPT_CLASSES.get(path.suffix.lower(), "TIFF picture")
        posix_path = str(path).replace("\\", "\\\\").replace('"', '\\"')
        return f'set the clipboard to (read (POSIX file "{posix_path}") as {picture_class})'

    def set_image(self, path: Path) -> None:
        try:
            result = subprocess.run(
                [self.executable, "-e", self.build_script(path)],
                capture_output=True,
                text=True,
                shell=False,
            )
        except OSError as e:
            raise ClipboardError(f"Failed to run {self.executable}: {e}", output=str(e)) from e

        if result.returncode != 0:
            output = (result.stderr or result.stdout or "").strip()
            raise ClipboardError(
                f"Failed to copy image to clipboard: {output or f'exit code {result.returncode}'}",
                output=output,
            )


class FakeClipboardBackend(ClipboardBackend):
    """In-memory backend for tests and unsupported platforms."""

    def __init__(self):
        self.copied: list[Path] = []

    @property
    def backend_name(self) -> str:
        return "fake"

    def set_image(self, path: Path) -> None:
        self.copied.append(path)


def get_clipboard_backend(config: GrabConfig) -> ClipboardBackend:
    """Pick the clipboard backend named by the configuration.

    "auto" uses osascript when it is available (macOS) and the fake backend
    elsewhere.
    """
    if config.clipboard_backend == "fake":
        return FakeClipboardBackend()
    if config.clipboard_backend == "osascript":
        return OsaScriptClipboardBackend()

    if sys.platform == "darwin" and shutil.which("osascript"):
        return OsaScriptClipboardBackend()
    logger.warning("No system clipboard backend for this platform, using fake backend")
    return FakeClipboardBackend()


def copy_image_to_clipboard(store: SettingsStore, filename: str, backend: ClipboardBackend) -> Path:
    """Copy a named image capture onto the system clipboard.

    Returns:
        The artifact path handed to the backend

    Raises:
        CaptureNotFoundError: If the file does not exist
        ClipboardError: If the capture is not an image or the backend fails
    """
    path = resolve_artifact_path(store, filename, kind="Image")
    if classify_capture(filename) != "image":
        raise ClipboardError(f"Only image captures can be copied to the clipboard: {filename}")
    backend.set_image(path)
    logger.info(f"Copied {filename} to clipboard via {backend.backend_name}")
    return path
