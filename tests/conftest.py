"""Pytest configuration and fixtures."""

import json
import logging

import pytest

from probemeta import config
from probemeta.sample import placeholder
from probemeta.utils import configure_default_logging


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and PROBEMETA_* variables out of the tests.

    Numbers render in en_US unless a test overrides the locale.
    """
    for key in ("PROBEMETA_LOG_LEVEL", "PROBEMETA_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PROBEMETA_LOCALE", "en_US")
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [tmp_path / "missing.yaml"])
    config.reset_config()
    placeholder.cache_clear()
    yield
    config.reset_config()
    placeholder.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging set up by CLI runs."""
    yield
    configure_default_logging()
    logging.getLogger().handlers.clear()


@pytest.fixture
def probe_payload() -> dict:
    """ffprobe output for a short clip with one stream of each kind."""
    return {
        "streams": [
            {
                "index": 0,
                "codec_name": "h264",
                "codec_type": "video",
                "width": 1280,
                "height": 720,
                "avg_frame_rate": "30000/1001",
                "r_frame_rate": "30000/1001",
                "pix_fmt": "yuv420p",
                "duration": "12.500000",
                "bit_rate": "2500000",
                "disposition": {"default": 1},
            },
            {
                "index": 1,
                "codec_name": "aac",
                "codec_type": "audio",
                "sample_rate": "48000",
                "channels": 2,
                "channel_layout": "stereo",
                "duration": 12.5,
                "tags": {"language": "eng", "title": "Stereo"},
            },
            {
                "index": 2,
                "codec_name": "subrip",
                "codec_type": "subtitle",
                "tags": {"language": "fra"},
            },
            {
                "index": 3,
                "codec_type": "data",
                "codec_tag_string": "tmcd",
            },
        ],
        "format": {
            "filename": "clip.mp4",
            "nb_streams": 4,
            "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
            "format_long_name": "QuickTime / MOV",
            "duration": "12.500000",
            "size": "3932160",
            "bit_rate": "2516582",
            "tags": {"creation_time": "2023-12-05T10:20:30.000000Z"},
        },
    }


@pytest.fixture
def probe_json(probe_payload) -> bytes:
    """Well-formed JSON for probe_payload."""
    return json.dumps(probe_payload, indent=4).encode("utf-8")


@pytest.fixture
def escaped_probe_output(probe_payload) -> str:
    """probe_payload as the single escaped line captured from the tool."""
    text = json.dumps(probe_payload, indent=4)
    return text.replace('"', '\\"').replace("\n", "\\n")
