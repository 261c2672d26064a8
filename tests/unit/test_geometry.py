# File: tests/unit/test_geometry.py
"""
Unit tests for the time-geometry engine.
"""

import pytest

from sceudl.core.geometry import (
    in_day, offset_to_minutes, offset_to_time, snap, style_for, time_to_offset
)
from sceudl.models import ContainerGeometry, EventStyle, TimeOfDay


class TestTimeToOffset:
    """Tests for time -> pixel mapping."""

    def test_midnight_is_zero(self):
        """Test that midnight maps to offset zero."""
        assert time_to_offset(TimeOfDay(0, 0)) == 0

    def test_whole_and_partial_hours(self):
        """Test whole and partial hours."""
        assert time_to_offset(TimeOfDay(9, 0)) == 720
        assert time_to_offset(TimeOfDay(9, 30)) == 760
        assert time_to_offset(TimeOfDay(23, 45), 40) == pytest.approx(950)

    def test_round_trip_is_exact_for_whole_minutes(self):
        """Test that whole minutes round-trip exactly."""
        for minutes in (0, 1, 59, 540, 1439):
            time = TimeOfDay.from_minutes(minutes)
            assert offset_to_time(time_to_offset(time)) == pytest.approx(minutes)


class TestOffsetToTime:
    """Tests for pixel -> minutes mapping."""

    def test_inverse_mapping(self):
        """Test the inverse mapping."""
        assert offset_to_time(760) == pytest.approx(570)

    def test_negative_offset_clamps_to_midnight(self):
        """Test that a negative offset clamps to midnight."""
        assert offset_to_time(-50) == 0

    def test_past_end_of_day_clamps_below_midnight(self):
        """Test that offsets past the day clamp below midnight."""
        minutes = offset_to_time(24 * 80 + 10)
        assert minutes < 1440
        assert minutes == pytest.approx(1440)

    def test_unclamped_variant_keeps_sign(self):
        """Test that the unclamped variant keeps the sign."""
        assert offset_to_minutes(-80) == -60
        assert offset_to_minutes(24 * 80) == 1440

    def test_rejects_non_positive_scale(self):
        """Test that a non-positive scale is rejected."""
        with pytest.raises(ValueError):
            offset_to_minutes(10, 0)


class TestSnap:
    """Tests for snapping to the 15-minute grid."""

    @pytest.mark.parametrize("minutes,expected", [
        (0, 0),
        (7, 0),
        (7.5, 15),
        (8, 15),
        (22.5, 30),
        (674, 675),
        (-7.5, 0),
        (-8, -15),
    ])
    def test_rounds_to_nearest_with_ties_up(self, minutes, expected):
        """Test rounding to nearest with ties up."""
        assert snap(minutes) == expected

    def test_idempotent(self):
        """Test that snapping is idempotent."""
        for minutes in (3, 29.9, 612.4, 1439):
            assert snap(snap(minutes)) == snap(minutes)

    def test_result_is_multiple_of_granularity(self):
        """Test that results are multiples of the granularity."""
        assert snap(44, 30) == 30
        assert snap(46, 30) == 60

    def test_rejects_non_positive_granularity(self):
        """Test that a non-positive granularity is rejected."""
        with pytest.raises(ValueError):
            snap(10, 0)


class TestStyleFor:
    """Tests for block placement."""

    def test_one_hour_block(self):
        """Test a one hour block."""
        style = style_for(TimeOfDay(9, 0), TimeOfDay(10, 0))
        assert style == EventStyle(top=720, height=80)
        assert style.to_css() == {'top': '720px', 'height': '80px'}

    def test_height_is_proportional_to_duration(self):
        """Test that height is proportional to duration."""
        style = style_for(TimeOfDay(13, 15), TimeOfDay(14, 0))
        assert style.top == pytest.approx(1060)
        assert style.height == pytest.approx(60)

    def test_rejects_inverted_range(self):
        """Test that an inverted range is rejected."""
        with pytest.raises(ValueError):
            style_for(TimeOfDay(10, 0), TimeOfDay(9, 0))


class TestContainerGeometry:
    """Tests for client <-> local conversion."""

    def test_local_y_accounts_for_top_and_scroll(self):
        """Test that local y accounts for top and scroll."""
        container = ContainerGeometry(day=2, top=100, scroll_top=240)
        assert container.local_y(150) == 290
        assert container.client_y(290) == 150

    @pytest.mark.parametrize("day", [0, 8])
    def test_rejects_day_outside_week(self, day):
        """Test that a column must host a day index 1..7."""
        with pytest.raises(ValueError, match="1..7"):
            ContainerGeometry(day=day, top=100)


def test_in_day_bounds():
    """Test day bounds."""
    assert in_day(0)
    assert in_day(1439)
    assert not in_day(1440)
    assert not in_day(-15)
