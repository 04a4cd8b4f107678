"""Command surface exposed to the presentation layer.

Each command is a synchronous request/response call. ``invoke`` dispatches by
name and turns every GrabError into an error string, which is what the UI
displays.
"""

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, ValidationError

from .clipboard import ClipboardBackend, ClipboardEventMailbox, copy_image_to_clipboard, get_clipboard_backend
from .config import GrabConfig
from .content import read_image_content, read_text_content, save_capture_to_downloads
from .errors import GrabError
from .metadata import get_capture_metadata
from .models.settings import AppSettings
from .paths import AppPaths
from .registry import delete_capture, list_captures
from .resolver import resolve_captures_dir
from .settings import SettingsStore

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Outcome of one command invocation."""

    ok: bool
    data: Any = Field(default=None)
    error: Optional[str] = Field(default=None)


class CommandSurface:
    """The backend commands available to the UI."""

    def __init__(self, config: GrabConfig, clipboard_backend: Optional[ClipboardBackend] = None):
        self.config = config
        self.paths = AppPaths.from_config(config)
        self.store = SettingsStore(self.paths)
        self.mailbox = ClipboardEventMailbox(self.paths.clipboard_event_file)
        self.clipboard_backend = clipboard_backend or get_clipboard_backend(config)

        self._commands: dict[str, Callable[..., Any]] = {
            "get_captures_dir": self.get_captures_dir,
            "list_captures": self.list_captures,
            "get_capture_metadata": self.get_capture_metadata,
            "get_text_content": self.get_text_content,
            "get_image_content": self.get_image_content,
            "get_app_settings": self.get_app_settings,
            "save_app_settings": self.save_app_settings,
            "copy_image_to_clipboard": self.copy_image_to_clipboard,
            "check_clipboard_event": self.check_clipboard_event,
            "delete_capture": self.delete_capture,
            "save_capture_to_downloads": self.save_capture_to_downloads,
        }

    @property
    def command_names(self) -> list[str]:
        return sorted(self._commands)

    def invoke(self, name: str, **kwargs: Any) -> CommandResult:
        """Run a command by name.

        Args:
            name: Command name (e.g. "list_captures")
            **kwargs: Command arguments (e.g. filename="shot.png")

        Returns:
            CommandResult with JSON-ready data, or the error message
        """
        handler = self._commands.get(name)
        if handler is None:
            return CommandResult(ok=False, error=f"Unknown command: {name}")

        try:
            return CommandResult(ok=True, data=handler(**kwargs))
        except GrabError as e:
            logger.debug(f"Command {name} failed: {e}")
            return CommandResult(ok=False, error=str(e))
        except (TypeError, ValidationError) as e:
            return CommandResult(ok=False, error=f"Invalid arguments for {name}: {e}")

    def get_captures_dir(self) -> str:
        return str(resolve_captures_dir(self.store))

    def list_captures(self) -> list[dict]:
        return [entry.model_dump(mode="json", by_alias=True) for entry in list_captures(self.store)]

    def get_capture_metadata(self, filename: str) -> dict:
        return get_capture_metadata(self.store, filename).model_dump(mode="json", by_alias=True)

    def get_text_content(self, filename: str) -> str:
        return read_text_content(self.store, filename)

    def get_image_content(self, filename: str) -> str:
        return read_image_content(self.store, filename)

    def get_app_settings(self) -> dict:
        return self.store.load().model_dump()

    def save_app_settings(self, settings: dict | AppSettings) -> dict:
        record = settings if isinstance(settings, AppSettings) else AppSettings.model_validate(settings)
        self.store.save(record)
        return record.model_dump()

    def copy_image_to_clipboard(self, filename: str) -> None:
        copy_image_to_clipboard(self.store, filename, self.clipboard_backend)

    def check_clipboard_event(self) -> Any:
        return self.mailbox.poll()

    def delete_capture(self, filename: str) -> list[str]:
        return [str(p) for p in delete_capture(self.store, filename)]

    def save_capture_to_downloads(self, filename: str) -> str:
        return str(save_capture_to_downloads(self.store, filename, self.paths.downloads))
