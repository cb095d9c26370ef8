"""Top level media metadata model."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from .format import FormatMetadata
from .stream import AudioStream, DataStream, StreamMetadata, SubtitleStream, VideoStream


class MediaMetadata(BaseModel):
    """Decoded ffprobe output for one media file.

    - streams: video, audio, subtitle and data streams in ffprobe index order
    - format: container properties such as name, duration, size and bit rate

    Identity is narrowed to the file name: two values compare equal and hash
    the same whenever ``format.file_name`` matches, whatever their streams or
    other format fields contain. Two decodes of the same file are treated as
    the same entity. Compare fields explicitly when structural equality is
    needed.
    """

    model_config = ConfigDict(frozen=True)

    streams: tuple[StreamMetadata, ...]
    format: FormatMetadata

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaMetadata):
            return NotImplemented
        return self.format.file_name == other.format.file_name

    def __hash__(self) -> int:
        return hash(self.format.file_name)

    # Convenience properties
    @property
    def file_name(self) -> str:
        return self.format.file_name

    @property
    def duration(self) -> timedelta | None:
        return self.format.duration

    @property
    def video_streams(self) -> list[VideoStream]:
        return [s for s in self.streams if isinstance(s, VideoStream)]

    @property
    def audio_streams(self) -> list[AudioStream]:
        return [s for s in self.streams if isinstance(s, AudioStream)]

    @property
    def subtitle_streams(self) -> list[SubtitleStream]:
        return [s for s in self.streams if isinstance(s, SubtitleStream)]

    @property
    def data_streams(self) -> list[DataStream]:
        return [s for s in self.streams if isinstance(s, DataStream)]
