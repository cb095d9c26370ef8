"""Tests for file size unit selection and formatting."""

import pytest
from pydantic import ValidationError

from probemeta.models import FileSize, FileSizeUnit, RoundingRule, file_size_formatted


class TestFileSizeUnit:
    """Test unit multipliers."""

    def test_multipliers_step_by_1024(self):
        assert FileSizeUnit.BYTES.multiplier == 1
        assert FileSizeUnit.KILOBYTES.multiplier == 1024
        assert FileSizeUnit.MEGABYTES.multiplier == 1024**2
        assert FileSizeUnit.EXABYTES.multiplier == 1024**6


class TestOptimal:
    """Test FileSize.optimal."""

    def test_zero_stays_in_smallest_unit(self):
        optimal = FileSize(size=0).optimal()

        assert optimal == FileSize(size=0, unit=FileSizeUnit.BYTES)
        assert optimal.formatted("en_US") == "0 B"

    def test_zero_in_larger_unit_becomes_bytes(self):
        assert FileSize(size=0, unit=FileSizeUnit.GIGABYTES).optimal().unit == FileSizeUnit.BYTES

    def test_below_boundary(self):
        optimal = FileSize(size=1023).optimal()

        assert optimal.unit == FileSizeUnit.BYTES
        assert optimal.size == 1023

    def test_exact_boundary_selects_next_unit(self):
        optimal = FileSize(size=1024).optimal()

        assert optimal.unit == FileSizeUnit.KILOBYTES
        assert optimal.size == 1

    def test_exact_megabyte(self):
        assert FileSize(size=1024**2).optimal() == FileSize(size=1, unit=FileSizeUnit.MEGABYTES)

    def test_from_larger_unit(self):
        optimal = FileSize(size=2048, unit=FileSizeUnit.KILOBYTES).optimal()

        assert optimal == FileSize(size=2, unit=FileSizeUnit.MEGABYTES)

    def test_fraction_of_unit_scales_down(self):
        optimal = FileSize(size=0.5, unit=FileSizeUnit.MEGABYTES).optimal()

        assert optimal == FileSize(size=512, unit=FileSizeUnit.KILOBYTES)

    def test_no_rule_keeps_precision(self):
        assert FileSize(size=1025).optimal().size == pytest.approx(1.0009765625)

    @pytest.mark.parametrize(
        ("size", "rule", "expected"),
        [
            (1536, RoundingRule.NEAREST, 2),
            (2560, RoundingRule.NEAREST, 3),
            (1400, RoundingRule.NEAREST, 1),
            (1900, RoundingRule.TRUNCATE, 1),
            (1025, RoundingRule.UP, 2),
            (2047, RoundingRule.DOWN, 1),
        ],
    )
    def test_rounding_rules(self, size, rule, expected):
        optimal = FileSize(size=size).optimal(rule)

        assert optimal.unit == FileSizeUnit.KILOBYTES
        assert optimal.size == expected


class TestFormatting:
    """Test rendering of sizes."""

    def test_formatted(self):
        assert FileSize(size=1.5, unit=FileSizeUnit.MEGABYTES).formatted("en_US") == "1.5 MB"

    def test_formatted_uses_configured_locale(self):
        assert str(FileSize(size=1, unit=FileSizeUnit.GIGABYTES)) == "1 GB"

    def test_converted(self):
        size = FileSize(size=3, unit=FileSizeUnit.MEGABYTES).converted(FileSizeUnit.KILOBYTES)

        assert size == FileSize(size=3072, unit=FileSizeUnit.KILOBYTES)

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            FileSize(size=-1)

    def test_file_size_formatted(self):
        assert file_size_formatted(1024**2, FileSizeUnit.BYTES, locale="en_US") == "1 MB"
        assert (
            file_size_formatted(1536, FileSizeUnit.BYTES, RoundingRule.TRUNCATE, locale="en_US")
            == "1 KB"
        )

    def test_file_size_formatted_unknown(self):
        assert file_size_formatted(None, FileSizeUnit.BYTES) is None
