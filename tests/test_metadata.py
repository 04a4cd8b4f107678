"""Tests for sidecar metadata loading."""

import json

import pytest

from grab_actions.errors import CaptureNotFoundError, MetadataError
from grab_actions.metadata import get_capture_metadata, load_capture_metadata, sidecar_path
from grab_actions.models.capture import CaptureMetadata


def test_sidecar_path(tmp_path):
    assert sidecar_path(tmp_path, "shot.png") == tmp_path / "shot.png.json"


def test_load_full_record(tmp_path):
    path = tmp_path / "clip.png.json"
    path.write_text(
        json.dumps(
            {
                "id": "c-1",
                "timestamp": "2025-06-01 10:00:00 +0000",
                "type": "clipboard",
                "contentType": "image",
                "filename": "clip.png",
                "fileExtension": "png",
                "fileSize": -1,
                "metadata": {
                    "dimensions": {"width": 1440, "height": 900.5},
                    "applicationName": "Preview",
                    "windowTitle": "clip.png",
                    "clipboardType": "image",
                },
            }
        )
    )

    meta = load_capture_metadata(path)

    assert meta.timestamp == "2025-06-01 10:00:00 +0000"
    assert meta.file_size == -1
    assert meta.metadata.dimensions.width == 1440.0
    assert meta.metadata.dimensions.height == 900.5
    assert meta.metadata.clipboard_type == "image"


def test_optional_details_may_be_absent(tmp_path):
    path = tmp_path / "note.txt.json"
    path.write_text(
        json.dumps(
            {
                "id": "n-1",
                "timestamp": "t",
                "type": "clipboard",
                "filename": "note.txt",
                "fileExtension": "txt",
                "fileSize": 5,
            }
        )
    )

    meta = load_capture_metadata(path)

    assert meta.metadata.dimensions is None
    assert meta.metadata.application_name is None
    assert meta.metadata.window_title is None
    assert meta.metadata.url is None


def test_missing_required_field_raises(tmp_path, sample_metadata):
    del sample_metadata["fileSize"]
    path = tmp_path / "shot.png.json"
    path.write_text(json.dumps(sample_metadata))

    with pytest.raises(MetadataError, match="Failed to parse metadata"):
        load_capture_metadata(path)


def test_unreadable_file_raises(tmp_path):
    with pytest.raises(MetadataError, match="Failed to read metadata file"):
        load_capture_metadata(tmp_path / "absent.json")


def test_dump_uses_external_names(sample_metadata):
    meta = CaptureMetadata.model_validate(sample_metadata)

    data = meta.model_dump(mode="json", by_alias=True)

    assert data["type"] == "screenshot"
    assert data["fileExtension"] == "png"
    assert data["fileSize"] == 2048
    assert data["metadata"]["applicationName"] == "Safari"
    assert data["metadata"]["dimensions"] is None


def test_get_capture_metadata(make_capture, sample_metadata, store):
    make_capture("shot.png", b"x", sidecar=sample_metadata)

    assert get_capture_metadata(store, "shot.png").id == "abc123"

    with pytest.raises(CaptureNotFoundError, match="Metadata file not found"):
        get_capture_metadata(store, "other.png")


def test_get_capture_metadata_surfaces_parse_errors(make_capture, store):
    make_capture("shot.png", b"x", sidecar="nope")

    with pytest.raises(MetadataError):
        get_capture_metadata(store, "shot.png")
