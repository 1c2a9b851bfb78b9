"""
Unit tests for decimal coercion helpers.

Tests quantization to column scale, float conversion, and column
scale lookup from the models.
"""

from decimal import Decimal

import pytest

from clipstack.core.errors import ValidationError
from clipstack.models import MediaAsset, Project, TimelineItem
from clipstack.services.numeric import (
    column_scale,
    integer_digits,
    to_decimal,
    to_float,
    to_storage,
)


class TestToDecimal:
    """Tests for to_decimal quantization."""

    def test_rounds_frame_rate_to_two_places(self):
        assert to_decimal(23.976, 2) == Decimal("23.98")

    def test_rounds_half_up(self):
        """0.125 is exactly representable, so this checks the rounding mode."""
        assert to_decimal(0.125, 2) == Decimal("0.13")

    def test_rounds_negative_half_away_from_zero(self):
        assert to_decimal(-0.125, 2) == Decimal("-0.13")

    def test_uses_shortest_float_repr(self):
        """2.675 is stored in binary just below .675; str() keeps it at .675."""
        assert to_decimal(2.675, 2) == Decimal("2.68")

    def test_pads_to_scale(self):
        assert str(to_decimal(10, 3)) == "10.000"

    def test_none_passes_through(self):
        assert to_decimal(None, 3) is None

    def test_accepts_decimal(self):
        assert to_decimal(Decimal("1.23456"), 3) == Decimal("1.235")


class TestToFloat:
    """Tests for to_float."""

    def test_converts_decimal(self):
        result = to_float(Decimal("120.500"))
        assert result == 120.5
        assert isinstance(result, float)

    def test_zero_is_not_null(self):
        assert to_float(Decimal("0.00")) == 0.0

    def test_none_passes_through(self):
        assert to_float(None) is None


class TestColumnScale:
    """Tests for scale lookup from model columns."""

    @pytest.mark.parametrize(
        "model,field,scale",
        [
            (Project, "frame_rate", 2),
            (Project, "duration", 3),
            (MediaAsset, "duration", 3),
            (TimelineItem, "start_time", 3),
            (TimelineItem, "volume", 2),
            (TimelineItem, "scale", 3),
            (TimelineItem, "rotation", 2),
        ],
    )
    def test_numeric_columns(self, model, field, scale):
        assert column_scale(model, field) == scale

    def test_non_numeric_column(self):
        assert column_scale(Project, "title") is None
        assert column_scale(TimelineItem, "track_number") is None


class TestToStorage:
    """Tests for to_storage."""

    def test_quantizes_numeric_column(self):
        assert to_storage(TimelineItem, "opacity", 0.555) == Decimal("0.56")

    def test_leaves_other_columns_alone(self):
        assert to_storage(Project, "status", "archived") == "archived"
        assert to_storage(TimelineItem, "track_number", 3) == 3

    def test_explicit_null_clears(self):
        assert to_storage(TimelineItem, "volume", None) is None

    def test_largest_value_that_fits(self):
        assert to_storage(Project, "frame_rate", 999.994) == Decimal("999.99")
        assert to_storage(TimelineItem, "scale", 99.9994) == Decimal("99.999")

    @pytest.mark.parametrize(
        "model,field,value",
        [
            (Project, "frame_rate", 999.996),
            (TimelineItem, "scale", 99.9996),
            (TimelineItem, "rotation", 9999.996),
            (TimelineItem, "rotation", -9999.996),
            (TimelineItem, "start_time", 9999999.9996),
            (TimelineItem, "position_x", 99999999.996),
            (MediaAsset, "duration", 9999999.9995),
        ],
    )
    def test_rejects_overflow_after_rounding(self, model, field, value):
        with pytest.raises(ValidationError) as exc_info:
            to_storage(model, field, value)
        assert exc_info.value.field == field


class TestIntegerDigits:
    """Tests for integer_digits."""

    @pytest.mark.parametrize(
        "model,field,digits",
        [
            (Project, "frame_rate", 3),
            (TimelineItem, "volume", 1),
            (TimelineItem, "position_x", 8),
            (TimelineItem, "end_time", 7),
        ],
    )
    def test_numeric_columns(self, model, field, digits):
        assert integer_digits(model, field) == digits

    def test_non_numeric_column(self):
        assert integer_digits(Project, "resolution_width") is None
