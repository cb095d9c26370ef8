"""File size value type and optimal unit selection."""

from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_UP, Decimal
from enum import Enum

from babel.numbers import format_decimal
from pydantic import BaseModel, ConfigDict, Field

from probemeta.localization import resolve_locale

UNIT_STEP = 1024


class FileSizeUnit(str, Enum):
    """Size units, each 1024 times the previous one."""

    BYTES = "B"
    KILOBYTES = "KB"
    MEGABYTES = "MB"
    GIGABYTES = "GB"
    TERABYTES = "TB"
    PETABYTES = "PB"
    EXABYTES = "EB"

    @property
    def multiplier(self) -> int:
        """Number of bytes in one of this unit."""
        return UNIT_STEP ** list(FileSizeUnit).index(self)

    @property
    def symbol(self) -> str:
        return self.value


class RoundingRule(str, Enum):
    """How a scaled size is rounded to a whole number."""

    NEAREST = "nearest"  # half away from zero
    TRUNCATE = "truncate"  # toward zero
    UP = "up"
    DOWN = "down"


_DECIMAL_ROUNDING = {
    RoundingRule.NEAREST: ROUND_HALF_UP,
    RoundingRule.TRUNCATE: ROUND_DOWN,
    RoundingRule.UP: ROUND_CEILING,
    RoundingRule.DOWN: ROUND_FLOOR,
}


def _round(value: float, rule: RoundingRule) -> float:
    rounded = Decimal(repr(value)).to_integral_value(rounding=_DECIMAL_ROUNDING[rule])
    return float(rounded)


class FileSize(BaseModel):
    """A byte count expressed in some unit."""

    model_config = ConfigDict(frozen=True)

    size: float = Field(ge=0)
    unit: FileSizeUnit = FileSizeUnit.BYTES

    def to_bytes(self) -> float:
        return self.size * self.unit.multiplier

    def converted(self, unit: FileSizeUnit) -> "FileSize":
        """Express the same amount in another unit."""
        return FileSize(size=self.to_bytes() / unit.multiplier, unit=unit)

    def optimal(self, rule: RoundingRule | None = None) -> "FileSize":
        """Express the size in the largest unit that keeps the value at least 1.

        A size of zero stays in bytes. Exactly 1024 bytes is 1 KB.

        Args:
            rule: Rounding applied to the scaled value; None keeps full precision

        Returns:
            New FileSize in the selected unit
        """
        total = self.to_bytes()
        selected = FileSizeUnit.BYTES
        for unit in FileSizeUnit:
            if total / unit.multiplier >= 1:
                selected = unit
            else:
                break
        result = total / selected.multiplier
        if rule is not None:
            result = _round(result, rule)
        return FileSize(size=result, unit=selected)

    def formatted(self, locale: str | None = None) -> str:
        """Render as a locale formatted number and unit symbol, e.g. ``1.5 MB``."""
        number = format_decimal(self.size, locale=resolve_locale(locale), decimal_quantization=False)
        return f"{number} {self.unit.symbol}"

    def __str__(self) -> str:
        return self.formatted()


def file_size_formatted(
    value: int | None,
    unit: FileSizeUnit,
    rule: RoundingRule | None = None,
    locale: str | None = None,
) -> str | None:
    """Format an optional size in its optimal unit.

    Args:
        value: Size expressed in ``unit``, or None if unknown
        unit: Unit of ``value``
        rule: Optional rounding rule for the scaled value
        locale: Locale identifier; defaults to the ambient locale

    Returns:
        Formatted size, or None when the value is unknown
    """
    if value is None:
        return None
    return FileSize(size=value, unit=unit).optimal(rule).formatted(locale)
