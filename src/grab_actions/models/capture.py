"""Pydantic models for captures and their sidecar metadata."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class Dimensions(BaseModel):
    """Pixel size of an image capture as reported by the producer."""

    width: float
    height: float


class MetadataDetails(BaseModel):
    """Optional capture details nested under the sidecar's ``metadata`` key."""

    dimensions: Optional[Dimensions] = Field(default=None)
    application_name: Optional[str] = Field(default=None, alias="applicationName")
    window_title: Optional[str] = Field(default=None, alias="windowTitle")
    clipboard_type: Optional[str] = Field(default=None, alias="clipboardType")
    url: Optional[str] = Field(default=None)

    model_config = {"populate_by_name": True}


class CaptureMetadata(BaseModel):
    """Sidecar metadata for one artifact.

    Written by the native capture app as <artifact_filename>.json next to the
    artifact. External field names are camelCase; ``type`` is the producer's
    capture kind and is never reconciled with the extension-derived type.
    """

    id: str = Field(description="Producer-assigned capture identifier")
    timestamp: str = Field(description="Producer timestamp, kept verbatim")
    capture_type: str = Field(alias="type", description="Capture kind as recorded by the producer")
    filename: str
    file_extension: str = Field(alias="fileExtension")
    file_size: int = Field(alias="fileSize", description="Producer-reported size in bytes")
    metadata: MetadataDetails = Field(default_factory=MetadataDetails)

    model_config = {"populate_by_name": True}


CaptureType = Literal["image", "text"]


class CaptureEntry(BaseModel):
    """One artifact in a capture directory listing.

    A read-only snapshot of the filesystem at scan time.
    """

    name: str = Field(description="File name, unique within the listing")
    path: str = Field(description="Absolute path to the artifact")
    modified: int = Field(description="Modification time, whole seconds since epoch")
    size: int = Field(description="Size on disk in bytes")
    capture_type: CaptureType
    has_metadata: bool = Field(description="True if <name>.json existed at scan time")
    metadata: Optional[CaptureMetadata] = Field(default=None)

    model_config = {"frozen": True}
