"""Stream metadata models.

ffprobe reports every stream in one list; ``codec_type`` tells video, audio,
subtitle and data streams apart. Codec types without a model of their own
(``attachment`` in Matroska files, for instance) are kept as data streams.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from probemeta.formatters.hertz import format_hertz

from .coercion import LenientDuration, LenientInt
from .mappings import DispositionMap, TagMap

STREAM_KINDS = ("video", "audio", "subtitle", "data")


def _parse_rate(value: str | None) -> float | None:
    """Parse a ``num/den`` rate such as ``30000/1001``."""
    if not value or "/" not in value:
        return None
    try:
        num, den = value.split("/", 1)
        if int(den) > 0:
            return int(num) / int(den)
    except ValueError:
        pass
    return None


class BaseStream(BaseModel):
    """Fields every ffprobe stream carries."""

    model_config = ConfigDict(frozen=True, ser_json_timedelta="float")

    index: int
    codec_type: str
    codec_name: str | None = None
    codec_long_name: str | None = None
    codec_tag_string: str | None = None
    codec_tag: str | None = None
    profile: str | None = None
    time_base: str | None = None
    r_frame_rate: str | None = None
    avg_frame_rate: str | None = None
    start_pts: LenientInt = None
    start_time: LenientDuration = None
    duration_ts: LenientInt = None
    duration: LenientDuration = None
    bit_rate: LenientInt = None
    nb_frames: LenientInt = None
    disposition: DispositionMap = Field(default_factory=dict, validate_default=True)
    tags: TagMap = Field(default_factory=dict, validate_default=True)

    @property
    def language(self) -> str | None:
        return self.tags.get("language")

    @property
    def title(self) -> str | None:
        return self.tags.get("title")

    @property
    def is_default(self) -> bool:
        return self.disposition.get("default", 0) == 1


class VideoStream(BaseStream):
    """Video stream technical information."""

    codec_type: Literal["video"] = "video"
    width: int | None = None
    height: int | None = None
    coded_width: int | None = None
    coded_height: int | None = None
    has_b_frames: int | None = None
    sample_aspect_ratio: str | None = None
    display_aspect_ratio: str | None = None
    pix_fmt: str | None = None
    level: int | None = None
    color_range: str | None = None
    color_space: str | None = None
    color_transfer: str | None = None
    color_primaries: str | None = None
    field_order: str | None = None
    bits_per_raw_sample: LenientInt = None

    @property
    def resolution(self) -> str | None:
        """Return resolution as WxH string."""
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None

    @property
    def frame_rate(self) -> float | None:
        """Average frame rate, falling back to the base frame rate."""
        return _parse_rate(self.avg_frame_rate) or _parse_rate(self.r_frame_rate)


class AudioStream(BaseStream):
    """Audio stream technical information."""

    codec_type: Literal["audio"] = "audio"
    sample_fmt: str | None = None
    sample_rate: LenientInt = None
    channels: int | None = None
    channel_layout: str | None = None
    bits_per_sample: int | None = None

    @property
    def sample_rate_formatted(self) -> str | None:
        """Sample rate in the current locale, e.g. ``48,000 Hz``."""
        if self.sample_rate is None:
            return None
        return format_hertz(self.sample_rate)


class SubtitleStream(BaseStream):
    """Subtitle stream information."""

    codec_type: Literal["subtitle"] = "subtitle"
    width: int | None = None
    height: int | None = None


class DataStream(BaseStream):
    """Data stream, or any stream kind without a dedicated model."""


def _stream_kind(value: Any) -> str:
    if isinstance(value, dict):
        codec_type = value.get("codec_type")
    else:
        codec_type = getattr(value, "codec_type", None)
    return codec_type if codec_type in STREAM_KINDS else "data"


StreamMetadata = Annotated[
    Union[
        Annotated[VideoStream, Tag("video")],
        Annotated[AudioStream, Tag("audio")],
        Annotated[SubtitleStream, Tag("subtitle")],
        Annotated[DataStream, Tag("data")],
    ],
    Discriminator(_stream_kind),
]
