"""Bundled sample metadata for debugging and previews."""

from collections.abc import Callable
from functools import cache
from importlib import resources

from probemeta.decoder import decode_metadata
from probemeta.errors import MetadataDecodeError
from probemeta.models import MediaMetadata
from probemeta.utils.logger import get_logger

logger = get_logger(__name__)

PLACEHOLDER_RESOURCE = "metadata.json"


def read_bundled_resource(name: str = PLACEHOLDER_RESOURCE) -> bytes | None:
    """Read a file shipped in ``probemeta/data``, or None if it is missing."""
    try:
        return resources.files("probemeta.data").joinpath(name).read_bytes()
    except OSError as e:
        logger.debug("Bundled resource unavailable", resource=name, error=str(e))
        return None


def load_placeholder(
    loader: Callable[[], bytes | None] = read_bundled_resource,
) -> MediaMetadata | None:
    """Decode the sample metadata file.

    Args:
        loader: Callable returning the raw JSON bytes, or None

    Returns:
        MediaMetadata, or None if the resource is missing or invalid
    """
    data = loader()
    if data is None:
        return None
    try:
        return decode_metadata(data)
    except MetadataDecodeError as e:
        logger.debug("Bundled sample failed to decode", error=str(e))
        return None


@cache
def placeholder() -> MediaMetadata | None:
    """Return the bundled sample, loading it on first use."""
    return load_placeholder()
