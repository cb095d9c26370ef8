"""Tests for output formatters."""

import json

from probemeta import decode_metadata
from probemeta.formatters import format_default, format_json, format_quiet, to_dict
from probemeta.formatters.json import format_json_list
from probemeta.formatters.quiet import format_quiet_list


def test_format_default(probe_json):
    output = format_default(decode_metadata(probe_json))

    assert "File: clip.mp4" in output
    assert "Container:    QuickTime / MOV" in output
    assert "Duration:     12.5s" in output
    assert "Size:         4 MB" in output
    assert "Created:      2023-12-05 10:20:30 UTC" in output
    assert "#0 video     h264, 1280x720, 29.97 fps, yuv420p [DEFAULT]" in output
    assert "#1 audio     aac, 48,000 Hz, stereo, eng" in output
    assert "#2 subtitle  subrip, fra" in output
    assert "#3 data      tmcd" in output


def test_format_default_without_streams():
    metadata = decode_metadata(b'{"streams": [], "format": {"filename": "empty.mp4"}}')

    output = format_default(metadata)

    assert "(none)" in output
    assert "Duration:     N/A" in output
    assert "Size:         N/A" in output


def test_format_quiet(probe_json):
    output = format_quiet(decode_metadata(probe_json))

    assert output == "clip.mp4 | mov,mp4,m4a,3gp,3g2,mj2 | 12.5s | 1280x720 | 3.75 MB | 1v 1a 1s 1d"


def test_format_quiet_list(probe_json):
    metadata = decode_metadata(probe_json)

    assert len(format_quiet_list([metadata, metadata]).splitlines()) == 2


def test_json_uses_probe_keys(probe_json):
    metadata = decode_metadata(probe_json)

    data = to_dict(metadata)

    assert data["format"]["filename"] == "clip.mp4"
    assert data["streams"][1]["sample_rate"] == 48000
    assert json.loads(format_json(metadata))["format"]["size"] == 3932160


def test_json_round_trips(probe_json):
    """Exported JSON decodes back to the same file."""
    metadata = decode_metadata(probe_json)

    assert decode_metadata(format_json(metadata)).format.duration == metadata.format.duration


def test_format_json_list(probe_json):
    metadata = decode_metadata(probe_json)

    assert len(json.loads(format_json_list([metadata, metadata]))) == 2
