"""Tests for the bundled sample metadata."""

from datetime import timedelta

from probemeta.models import AudioStream, DataStream, SubtitleStream, VideoStream
from probemeta.sample import load_placeholder, placeholder, read_bundled_resource


def test_placeholder_decodes():
    """The bundled sample is a complete ffprobe document."""
    metadata = placeholder()

    assert metadata is not None
    assert metadata.file_name == "sample.mp4"
    assert metadata.duration == timedelta(seconds=120)
    assert [type(s) for s in metadata.streams] == [
        VideoStream,
        AudioStream,
        SubtitleStream,
        DataStream,
    ]


def test_placeholder_is_loaded_once():
    assert placeholder() is placeholder()


def test_read_missing_resource():
    assert read_bundled_resource("missing.json") is None


def test_missing_resource_yields_none():
    assert load_placeholder(lambda: None) is None


def test_invalid_resource_yields_none():
    assert load_placeholder(lambda: b'{"streams": "nope"}') is None
