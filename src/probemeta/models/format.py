"""Container format metadata models."""

import contextlib
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .coercion import LenientDuration, LenientInt
from .mappings import TagMap
from .file_size import FileSizeUnit, RoundingRule, file_size_formatted


class FormatMetadata(BaseModel):
    """The ``format`` section of ffprobe output.

    Holds file properties such as name, number of streams, duration, size
    and bit rate.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, ser_json_timedelta="float")

    file_name: str = Field(alias="filename")
    nb_streams: LenientInt = None
    nb_programs: LenientInt = None
    format_name: str | None = None
    format_long_name: str | None = None
    start_time: LenientDuration = None
    duration: LenientDuration = None
    size: LenientInt = None
    bit_rate: LenientInt = None
    probe_score: LenientInt = None
    tags: TagMap = Field(default_factory=dict, validate_default=True)

    @property
    def creation_time(self) -> datetime | None:
        """Return the ``creation_time`` container tag as a datetime."""
        raw = self.tags.get("creation_time")
        if not raw:
            return None
        with contextlib.suppress(ValueError):
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        return None

    @property
    def duration_formatted(self) -> str:
        """Return duration as human-readable string."""
        if self.duration is None:
            return "N/A"
        duration = self.duration.total_seconds()
        if duration < 60:
            return f"{duration:.1f}s"
        minutes = int(duration // 60)
        seconds = duration % 60
        if minutes < 60:
            return f"{minutes}m {seconds:.1f}s"
        hours = minutes // 60
        minutes = minutes % 60
        return f"{hours}h {minutes}m {seconds:.0f}s"

    def size_formatted(
        self, rule: RoundingRule | None = None, locale: str | None = None
    ) -> str | None:
        """Return the file size in its optimal unit, e.g. ``"12.5 MB"``."""
        return file_size_formatted(self.size, FileSizeUnit.BYTES, rule=rule, locale=locale)

    @property
    def bit_rate_formatted(self) -> str | None:
        """Return bit rate in kb/s, the way ffprobe prints it."""
        if self.bit_rate is None:
            return None
        return f"{self.bit_rate // 1000} kb/s"
