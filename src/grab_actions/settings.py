"""Settings store for Grab Actions.

Settings are re-read from disk on every call; there is no cached copy, so a
save is visible to the very next load.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import SettingsError
from .models.settings import AppSettings
from .paths import AppPaths

logger = logging.getLogger(__name__)


class SettingsStore:
    """Loads and persists settings.json in the application-support root."""

    def __init__(self, paths: AppPaths):
        """Initialize the store.

        Args:
            paths: Application paths (settings file and default captures dir)
        """
        self.paths = paths

    @property
    def settings_file(self) -> Path:
        return self.paths.settings_file

    def load(self) -> AppSettings:
        """Load settings, creating them on first run.

        Returns:
            The persisted AppSettings

        Raises:
            SettingsError: If the file exists but cannot be read or parsed,
                or if first-run defaults cannot be written
        """
        if not self.settings_file.exists():
            try:
                default_dir = self.paths.ensure_default_captures_dir()
            except OSError as e:
                raise SettingsError(f"Failed to create default captures directory: {e}") from e
            settings = AppSettings(
                capture_folder=str(default_dir),
                default_capture_folder=str(default_dir),
            )
            logger.info(f"Settings file {self.settings_file} does not exist, creating defaults")
            self._write(settings)
            return settings

        try:
            content = self.settings_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsError(f"Failed to read settings file: {e}") from e

        try:
            return AppSettings.model_validate_json(content)
        except ValidationError as e:
            raise SettingsError(f"Failed to parse settings: {e}") from e

    def save(self, settings: AppSettings) -> None:
        """Persist settings, replacing the file in full.

        The configured capture folder is created if it does not exist yet.

        Raises:
            SettingsError: If the folder or the file cannot be written
        """
        try:
            Path(settings.capture_folder).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SettingsError(f"Failed to create capture folder: {e}") from e
        self._write(settings)

    def reset(self) -> AppSettings:
        """Point the capture folder back at the default folder and save."""
        current = self.load()
        settings = current.model_copy(update={"capture_folder": current.default_capture_folder})
        self.save(settings)
        return settings

    def _write(self, settings: AppSettings) -> None:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(
                json.dumps(settings.model_dump(), indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise SettingsError(f"Failed to write settings: {e}") from e
