"""Path management for the Grab application-support directory."""

from pathlib import Path

from .config import GrabConfig


class AppPaths:
    """Well-known files and folders under the application-support root."""

    def __init__(self, app_support_dir: Path, downloads_dir: Path | None = None):
        """Initialize paths from the application-support root.

        Args:
            app_support_dir: Root directory (e.g. ~/Library/Application Support/Grab)
            downloads_dir: Export target; defaults to <root>/exports
        """
        self.root = app_support_dir

        # Files shared with the native capture app
        self.settings_file = app_support_dir / "settings.json"
        self.clipboard_event_file = app_support_dir / "clipboard_event.json"

        # Directories
        self.default_captures_dir = app_support_dir / "captures"
        self.downloads = downloads_dir or app_support_dir / "exports"

    @classmethod
    def from_config(cls, config: GrabConfig) -> "AppPaths":
        """Create AppPaths from a GrabConfig."""
        return cls(config.app_support_dir, config.downloads_dir)

    def ensure_default_captures_dir(self) -> Path:
        """Create the default captures directory if needed and return it."""
        self.default_captures_dir.mkdir(parents=True, exist_ok=True)
        return self.default_captures_dir
