"""Quiet output formatter - one-line summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from probemeta.models import MediaMetadata


def format_quiet(metadata: MediaMetadata) -> str:
    """Format metadata as one-line summary.

    Format: filename | container | duration | resolution | size | streams
    """
    fmt = metadata.format
    parts = [metadata.file_name, fmt.format_name or "N/A", fmt.duration_formatted]

    video = metadata.video_streams
    parts.append((video[0].resolution or "N/A") if video else "N/A")

    parts.append(fmt.size_formatted() or "N/A")

    counts = (
        f"{len(metadata.video_streams)}v "
        f"{len(metadata.audio_streams)}a "
        f"{len(metadata.subtitle_streams)}s "
        f"{len(metadata.data_streams)}d"
    )
    parts.append(counts)

    return " | ".join(parts)


def format_quiet_list(metadata_list: list[MediaMetadata]) -> str:
    """Format multiple metadata objects as one-line summaries."""
    return "\n".join(format_quiet(m) for m in metadata_list)
