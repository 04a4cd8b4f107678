"""Configuration management for Grab Actions."""

import os
import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .errors import AppSupportError

APP_DIR_NAME = "Grab"


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise AppSupportError("Could not find home directory") from e


def default_app_support_dir(platform: Optional[str] = None) -> Path:
    """Return the per-user application-support directory for Grab.

    Args:
        platform: Override for sys.platform (used by tests)

    Returns:
        Path to the Grab application-support root (not created)

    Raises:
        AppSupportError: If the home directory cannot be determined
    """
    platform = platform or sys.platform

    if platform == "darwin":
        return _home_dir() / "Library" / "Application Support" / APP_DIR_NAME

    if platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_DIR_NAME
        return _home_dir() / "AppData" / "Roaming" / APP_DIR_NAME

    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / APP_DIR_NAME
    return _home_dir() / ".local" / "share" / APP_DIR_NAME


class GrabConfig(BaseModel):
    """Configuration for the Grab Actions backend."""

    app_support_dir: Path = Field(description="Root holding settings, events and default captures")
    downloads_dir: Path = Field(description="Target folder for exported captures")
    clipboard_backend: Literal["auto", "osascript", "fake"] = Field(default="auto")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, cli_app_support_dir: Optional[str] = None) -> "GrabConfig":
        """Load configuration from environment variables or platform defaults.

        Precedence for the application-support root:

        1. CLI --app-dir option (if provided)
        2. GRAB_APP_SUPPORT_DIR environment variable
        3. Platform default (see default_app_support_dir)

        Args:
            cli_app_support_dir: Root from the CLI (highest precedence)

        Raises:
            AppSupportError: If no root can be derived
        """
        root_value = cli_app_support_dir or os.environ.get("GRAB_APP_SUPPORT_DIR")
        if root_value:
            app_support_dir = Path(root_value).expanduser().resolve()
        else:
            app_support_dir = default_app_support_dir()

        downloads_value = os.environ.get("GRAB_DOWNLOADS_DIR")
        if downloads_value:
            downloads_dir = Path(downloads_value).expanduser().resolve()
        else:
            downloads_dir = _home_dir() / "Downloads"

        return cls(
            app_support_dir=app_support_dir,
            downloads_dir=downloads_dir,
            clipboard_backend=os.environ.get("GRAB_CLIPBOARD_BACKEND", "auto"),
        )
