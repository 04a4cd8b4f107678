"""Pydantic model for persisted application settings."""

from pydantic import AliasChoices, BaseModel, Field


class AppSettings(BaseModel):
    """User settings shared with the native capture app.

    Stored as settings.json in the application-support root. Written with
    snake_case keys; camelCase keys from the native app are accepted on read.
    """

    capture_folder: str = Field(
        validation_alias=AliasChoices("capture_folder", "captureFolder"),
        description="Active capture folder (user-settable)",
    )
    default_capture_folder: str = Field(
        validation_alias=AliasChoices("default_capture_folder", "defaultCaptureFolder"),
        description="Platform default folder, used as fallback",
    )
