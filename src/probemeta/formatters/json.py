"""JSON output formatter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from probemeta.models import MediaMetadata


def format_json(metadata: MediaMetadata, indent: int = 2) -> str:
    """Format metadata as JSON string.

    Args:
        metadata: MediaMetadata object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return metadata.model_dump_json(indent=indent, by_alias=True)


def format_json_list(metadata_list: list[MediaMetadata], indent: int = 2) -> str:
    """Format multiple metadata objects as JSON array."""
    data = [to_dict(m) for m in metadata_list]
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)


def to_dict(metadata: MediaMetadata) -> dict[str, Any]:
    """Convert metadata to a JSON compatible dictionary.

    Keys use ffprobe's names (``filename`` rather than ``file_name``).
    """
    return metadata.model_dump(mode="json", by_alias=True)
