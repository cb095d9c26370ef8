"""probemeta - typed metadata from ffprobe media information.

Repairs the escaped single-line JSON that FFmpeg kit style wrappers capture
from ``ffprobe -print_format json -show_format -show_streams`` and decodes it
into immutable pydantic models.

Usage:
    from probemeta import parse_media_information

    metadata = parse_media_information(captured_output)

    print(metadata.file_name, metadata.duration)
    for stream in metadata.audio_streams:
        print(stream.codec_name, stream.sample_rate_formatted)

    # Export as JSON
    print(metadata.model_dump_json(by_alias=True))
"""

from probemeta._version import __version__
from probemeta.decoder import decode_metadata, parse_many, parse_media_information
from probemeta.errors import MetadataDecodeError, MetadataError, RepairError
from probemeta.formatters import (
    format_default,
    format_hertz,
    format_json,
    format_quiet,
    to_dict,
)
from probemeta.models import (
    AudioStream,
    DataStream,
    FileSize,
    FileSizeUnit,
    FormatMetadata,
    MediaMetadata,
    RoundingRule,
    StreamMetadata,
    SubtitleStream,
    VideoStream,
    file_size_formatted,
)
from probemeta.repair import repair_media_information
from probemeta.sample import load_placeholder, placeholder

__all__ = [
    # Version
    "__version__",
    # Main functions
    "repair_media_information",
    "decode_metadata",
    "parse_media_information",
    "parse_many",
    "load_placeholder",
    "placeholder",
    # Errors
    "MetadataError",
    "RepairError",
    "MetadataDecodeError",
    # Models
    "MediaMetadata",
    "FormatMetadata",
    "StreamMetadata",
    "VideoStream",
    "AudioStream",
    "SubtitleStream",
    "DataStream",
    "FileSize",
    "FileSizeUnit",
    "RoundingRule",
    "file_size_formatted",
    # Formatters
    "format_default",
    "format_quiet",
    "format_json",
    "format_hertz",
    "to_dict",
]
