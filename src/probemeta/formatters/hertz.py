"""Frequency formatting."""

from collections.abc import Callable

from babel.numbers import format_decimal

from probemeta.localization import resolve_locale, system_locale

LOCALIZED_HERTZ_LOCALE = "ru_RU"
LOCALIZED_HERTZ_SYMBOL = "Гц"
HERTZ_SYMBOL = "Hz"


def format_hertz(
    value: int,
    locale: str | None = None,
    locale_provider: Callable[[], str] = system_locale,
) -> str:
    """Format a frequency such as a sample rate, e.g. ``48,000 Hz``.

    Russian locale renders the symbol as ``Гц``; every other locale uses ``Hz``.

    Args:
        value: Frequency in hertz
        locale: Locale identifier; read from ``locale_provider`` when omitted
        locale_provider: Callable returning the ambient locale identifier

    Returns:
        Grouped number, a space and the unit symbol
    """
    identifier = locale or locale_provider()
    symbol = LOCALIZED_HERTZ_SYMBOL if identifier == LOCALIZED_HERTZ_LOCALE else HERTZ_SYMBOL
    return f"{format_decimal(value, locale=resolve_locale(identifier))} {symbol}"
