"""Pydantic models for probemeta."""

from .coercion import (
    LenientDuration,
    LenientInt,
    coerce_duration,
    coerce_int,
    duration_from_string,
    int_from_string,
)
from .file_size import FileSize, FileSizeUnit, RoundingRule, file_size_formatted
from .format import FormatMetadata
from .media import MediaMetadata
from .stream import (
    AudioStream,
    BaseStream,
    DataStream,
    StreamMetadata,
    SubtitleStream,
    VideoStream,
)

__all__ = [
    # Main model
    "MediaMetadata",
    # Format
    "FormatMetadata",
    # Streams
    "StreamMetadata",
    "BaseStream",
    "VideoStream",
    "AudioStream",
    "SubtitleStream",
    "DataStream",
    # File size
    "FileSize",
    "FileSizeUnit",
    "RoundingRule",
    "file_size_formatted",
    # Coercion
    "LenientDuration",
    "LenientInt",
    "coerce_duration",
    "coerce_int",
    "duration_from_string",
    "int_from_string",
]
