"""Ambient locale lookup for number rendering."""

from babel import Locale, UnknownLocaleError, default_locale

from probemeta.config import get_config
from probemeta.utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_LOCALE = "en_US"


def system_locale() -> str:
    """Return the identifier of the locale numbers are rendered in.

    The configured display locale wins over the process environment
    (``LC_ALL``, ``LC_NUMERIC``, ``LANG``...).
    """
    configured = get_config().display.locale
    if configured:
        return configured
    return default_locale("LC_NUMERIC") or FALLBACK_LOCALE


def resolve_locale(identifier: str | None = None) -> Locale:
    """Parse a locale identifier, falling back to ``en_US`` if Babel does not know it."""
    identifier = identifier or system_locale()
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Unknown locale, using fallback", locale=identifier, error=str(e))
        return Locale.parse(FALLBACK_LOCALE)
