"""Decoding of repaired ffprobe JSON into MediaMetadata."""

from collections.abc import Iterable

from pydantic import ValidationError

from probemeta.errors import MetadataDecodeError, MetadataError, RepairError
from probemeta.models import MediaMetadata
from probemeta.repair import repair_media_information
from probemeta.utils.logger import get_logger

logger = get_logger(__name__)


def decode_metadata(data: bytes | str) -> MediaMetadata:
    """Decode ffprobe JSON into a MediaMetadata object.

    Numeric fields that ffprobe may print as strings (durations, sizes, bit
    rates, counts) are read from either form; unparsable or absent values
    become None.

    Args:
        data: Well-formed JSON produced by ``-print_format json``

    Returns:
        MediaMetadata object

    Raises:
        MetadataDecodeError: If the payload is not JSON, or a required field is
            missing or has the wrong type
    """
    try:
        return MediaMetadata.model_validate_json(data)
    except ValidationError as e:
        logger.debug("Failed to decode media metadata", error_count=e.error_count())
        raise MetadataDecodeError(
            f"Invalid media metadata: {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e


def parse_media_information(raw: str) -> MediaMetadata:
    """Repair captured probe output and decode it.

    Args:
        raw: Single-line escaped text captured from the probing tool

    Returns:
        MediaMetadata object

    Raises:
        RepairError: If the text cannot be repaired
        MetadataDecodeError: If the repaired JSON cannot be decoded
    """
    data = repair_media_information(raw)
    if data is None:
        raise RepairError("Media information could not be encoded as UTF-8")
    return decode_metadata(data)


def parse_many(raw_outputs: Iterable[str]) -> list[MediaMetadata]:
    """Parse multiple captured outputs.

    Inputs that fail to repair or decode are logged and skipped.

    Args:
        raw_outputs: Captured probe outputs, one per media file

    Returns:
        List of MediaMetadata objects for the inputs that decoded
    """
    results = []
    for position, raw in enumerate(raw_outputs):
        try:
            results.append(parse_media_information(raw))
        except MetadataError as e:
            logger.warning("Skipping media information", position=position, error=str(e))
    return results
