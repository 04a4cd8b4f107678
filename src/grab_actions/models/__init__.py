"""Pydantic models for Grab Actions."""

from .capture import CaptureEntry, CaptureMetadata, CaptureType, Dimensions, MetadataDetails
from .settings import AppSettings

__all__ = [
    "AppSettings",
    # Captures
    "CaptureEntry",
    "CaptureMetadata",
    "CaptureType",
    "Dimensions",
    "MetadataDetails",
]
