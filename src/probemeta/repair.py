"""Repair of ffprobe media information captured as a single escaped line.

FFmpeg kit style wrappers print the JSON document with newlines and quotes
escaped, e.g.::

    {\n    \"streams\": [...], \"format\": {...}}

which has to be turned back into::

    {
        "streams": [...],
        "format": {...}
    }
"""

from probemeta.utils.logger import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"

ESCAPED_NEWLINE = "\\n"
ESCAPED_QUOTE = '\\"'


def repair_media_information(raw: str) -> bytes | None:
    """Convert escaped probe output into well-formed JSON bytes.

    Only the two escapes the probing tool produces are handled: a literal
    backslash-n becomes a newline and a literal backslash-quote becomes a quote.

    Args:
        raw: Text captured from the probing tool

    Returns:
        UTF-8 encoded JSON, or None if the text cannot be encoded
    """
    converted = raw.replace(ESCAPED_NEWLINE, "\n").replace(ESCAPED_QUOTE, '"')
    try:
        return converted.encode(ENCODING)
    except UnicodeEncodeError as e:
        logger.debug("Repaired text is not encodable", encoding=ENCODING, error=str(e))
        return None
