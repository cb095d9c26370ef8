"""Coercion of fields that ffprobe emits either as numbers or as strings.

Depending on how FFmpeg was built, values such as ``duration`` or
``bit_rate`` arrive as ``12.5`` or as ``"12.5"``. Both are accepted; anything
that cannot be read as a number becomes None instead of failing validation.

Strings must be plain ASCII decimals. Python's own number parsing is looser
(surrounding whitespace, ``1_000``, ``nan``, non-ASCII digits) and is not
applied to them.
"""

import math
import re
from datetime import timedelta
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def duration_from_string(text: str) -> timedelta | None:
    """Parse a decimal number of seconds, e.g. ``"12.500000"``."""
    if not _DECIMAL.fullmatch(text):
        return None
    return _seconds_to_duration(float(text))


def int_from_string(text: str) -> int | None:
    """Parse a decimal integer, e.g. ``"1048576"``."""
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def _seconds_to_duration(seconds: float) -> timedelta | None:
    if not math.isfinite(seconds):
        return None
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        return None


def _is_number(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_duration(value: Any) -> timedelta | None:
    """Read a duration from a native number of seconds or its string form."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, str):
        return duration_from_string(value)
    if _is_number(value):
        return _seconds_to_duration(float(value))
    return None


def coerce_int(value: Any) -> int | None:
    """Read an integer from a native number or its string form."""
    if isinstance(value, str):
        return int_from_string(value)
    if _is_number(value):
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        return value
    return None


LenientDuration = Annotated[Optional[timedelta], BeforeValidator(coerce_duration)]
LenientInt = Annotated[Optional[int], BeforeValidator(coerce_int)]
