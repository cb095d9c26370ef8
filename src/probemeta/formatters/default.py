"""Default output formatter - readable report of format and streams."""

from __future__ import annotations

from typing import TYPE_CHECKING

from probemeta.models.file_size import RoundingRule

if TYPE_CHECKING:
    from probemeta.models import AudioStream, MediaMetadata, SubtitleStream, VideoStream


def _video_line(stream: VideoStream) -> str:
    parts = [stream.codec_name or "unknown"]
    if stream.resolution:
        parts.append(stream.resolution)
    if stream.frame_rate:
        parts.append(f"{stream.frame_rate:.2f} fps")
    if stream.pix_fmt:
        parts.append(stream.pix_fmt)
    return ", ".join(parts)


def _audio_line(stream: AudioStream) -> str:
    parts = [stream.codec_name or "unknown"]
    if stream.sample_rate_formatted:
        parts.append(stream.sample_rate_formatted)
    if stream.channel_layout:
        parts.append(stream.channel_layout)
    elif stream.channels:
        parts.append(f"{stream.channels}ch")
    if stream.language:
        parts.append(stream.language)
    return ", ".join(parts)


def _subtitle_line(stream: SubtitleStream) -> str:
    parts = [stream.codec_name or "unknown"]
    if stream.language:
        parts.append(stream.language)
    if stream.title:
        parts.append(stream.title)
    return ", ".join(parts)


def format_default(metadata: MediaMetadata) -> str:
    """Format metadata as a multi-line report.

    Sections:
    - FORMAT: container, duration, size, bit rate, creation time
    - STREAMS: one line per stream in ffprobe order
    """
    lines = []
    fmt = metadata.format

    lines.append("=" * 70)
    lines.append(f"File: {metadata.file_name}")
    lines.append("=" * 70)

    lines.append("")
    lines.append("## FORMAT")
    container = fmt.format_long_name or fmt.format_name or "Unknown"
    lines.append(f"  Container:    {container}")
    lines.append(f"  Duration:     {fmt.duration_formatted}")
    lines.append(f"  Size:         {fmt.size_formatted(RoundingRule.NEAREST) or 'N/A'}")
    if fmt.bit_rate_formatted:
        lines.append(f"  Bit Rate:     {fmt.bit_rate_formatted}")
    if fmt.creation_time:
        lines.append(f"  Created:      {fmt.creation_time.strftime('%Y-%m-%d %H:%M:%S %Z')}")

    lines.append("")
    lines.append("## STREAMS")
    if not metadata.streams:
        lines.append("  (none)")
    for stream in metadata.streams:
        if stream.codec_type == "video":
            detail = _video_line(stream)
        elif stream.codec_type == "audio":
            detail = _audio_line(stream)
        elif stream.codec_type == "subtitle":
            detail = _subtitle_line(stream)
        else:
            detail = stream.codec_name or stream.codec_tag_string or "unknown"
        default_marker = " [DEFAULT]" if stream.is_default else ""
        lines.append(f"  #{stream.index} {stream.codec_type:<9} {detail}{default_marker}")

    lines.append("")
    lines.append("=" * 70)

    return "\n".join(lines)
