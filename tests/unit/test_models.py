# File: tests/unit/test_models.py
"""
Unit tests for data models.
Tests the dataclasses and their methods.
"""

import dataclasses
import datetime

import pytest

from sceudl.models import (
    CalendarEvent, CalendarView, DuplicateIdError, EventColor,
    EventNotFoundError, InvalidRangeError, CalendarError, MonthCell,
    NavigationState, ScheduleResponse, SkippedEntry, TimeOfDay,
    event_from_dict, week_start_for
)


# ==================== TimeOfDay Tests ====================

class TestTimeOfDay:
    """Tests for TimeOfDay dataclass."""

    def test_parse_and_format(self):
        """Test parsing and formatting."""
        time = TimeOfDay.parse("9:05")
        assert time == TimeOfDay(9, 5)
        assert str(time) == "09:05"

    def test_minutes_round_trip(self):
        """Test conversion to and from minutes."""
        assert TimeOfDay(13, 45).to_minutes() == 825
        assert TimeOfDay.from_minutes(825) == TimeOfDay(13, 45)

    def test_ordering(self):
        """Test time ordering."""
        assert TimeOfDay(9, 0) < TimeOfDay(9, 30) < TimeOfDay(10, 0)

    @pytest.mark.parametrize("hour,minute", [(24, 0), (-1, 0), (10, 60)])
    def test_out_of_range_raises_error(self, hour, minute):
        """Test that out-of-range fields raise ValueError."""
        with pytest.raises(ValueError):
            TimeOfDay(hour, minute)

    def test_from_minutes_rejects_midnight_overflow(self):
        """Test that 1440 minutes is rejected."""
        with pytest.raises(ValueError):
            TimeOfDay.from_minutes(1440)

    def test_parse_rejects_garbage(self):
        """Test that unparsable strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid time string"):
            TimeOfDay.parse("nine")


# ==================== CalendarEvent Tests ====================

class TestCalendarEvent:
    """Tests for CalendarEvent dataclass."""

    def test_event_creation_coerces_strings(self):
        """Test basic event creation from strings."""
        event = CalendarEvent(title="Lab", start_time="14:00", end_time="15:30", day=4, color="green")

        assert event.start_time == TimeOfDay(14, 0)
        assert event.color is EventColor.GREEN
        assert event.duration_minutes() == 90
        assert event.time_range == "14:00 - 15:30"

    def test_end_before_start_raises_error(self):
        """Test that end before start raises ValueError."""
        with pytest.raises(ValueError, match="end time must be after start time"):
            CalendarEvent(title="Bad", start_time="10:00", end_time="09:00", day=2)

    def test_zero_length_raises_error(self):
        """Test that a zero-length event raises ValueError."""
        with pytest.raises(ValueError):
            CalendarEvent(title="Empty", start_time="10:00", end_time="10:00", day=2)

    @pytest.mark.parametrize("day", [0, 8])
    def test_day_out_of_range_raises_error(self, day):
        """Test that an invalid day index raises ValueError."""
        with pytest.raises(ValueError, match="Day index"):
            CalendarEvent(title="Bad", start_time="09:00", end_time="10:00", day=day)

    def test_overlaps_only_on_same_day(self, create_event):
        """Test overlap detection."""
        a = create_event(start="09:00", end="10:00", day=2)
        b = create_event(start="09:30", end="11:00", day=2)
        c = create_event(start="09:30", end="11:00", day=3)
        d = create_event(start="10:00", end="11:00", day=2)

        assert a.overlaps_with(b)
        assert not a.overlaps_with(c)
        assert not a.overlaps_with(d)

    def test_to_dict_and_back(self, monday_lecture):
        """Test conversion to dictionary and back."""
        event = dataclasses.replace(monday_lecture, id=7)
        data = event.to_dict()

        assert data['startTime'] == "09:00"
        assert data['color'] == "blue"
        assert event_from_dict(data) == event

    def test_from_dict_unknown_color_falls_back(self):
        """Test that an unknown color falls back to cyan."""
        event = event_from_dict({
            'title': 'X', 'start_time': '08:00', 'end_time': '09:00', 'day': 1, 'color': 'magenta'
        })
        assert event.color is EventColor.CYAN
        assert event.id is None


# ==================== Error Tests ====================

class TestErrors:
    """Tests for the store exception hierarchy."""

    def test_hierarchy(self):
        """Test the exception hierarchy."""
        assert issubclass(DuplicateIdError, KeyError)
        assert issubclass(EventNotFoundError, KeyError)
        assert issubclass(InvalidRangeError, ValueError)
        for cls in (DuplicateIdError, EventNotFoundError, InvalidRangeError):
            assert issubclass(cls, CalendarError)

    def test_carries_event_id(self):
        """Test that errors carry the event id."""
        assert EventNotFoundError(42).event_id == 42


# ==================== Navigation Tests ====================

class TestNavigationState:
    """Tests for NavigationState."""

    def test_week_start_for_is_previous_sunday(self):
        """Test that the week starts on the previous Sunday."""
        assert week_start_for(datetime.date(2025, 3, 5)) == datetime.date(2025, 3, 2)
        assert week_start_for(datetime.date(2025, 3, 2)) == datetime.date(2025, 3, 2)

    def test_day_index_mapping(self, navigation, week_start):
        """Test day index mapping."""
        assert navigation.day_index_of(week_start) == 1
        assert navigation.day_index_of(week_start + datetime.timedelta(days=6)) == 7
        assert navigation.day_index_of(week_start - datetime.timedelta(days=1)) is None
        assert navigation.date_of(2) == datetime.date(2025, 3, 3)
        assert navigation.selected_day_index == 2

    def test_week_dates_are_contiguous(self, navigation):
        """Test that week dates are contiguous."""
        dates = navigation.week_dates()
        assert len(dates) == 7
        assert all((b - a).days == 1 for a, b in zip(dates, dates[1:]))

    def test_select_date_opens_day_view(self, navigation):
        """Test that selecting a date opens the day view."""
        target = datetime.date(2025, 3, 20)
        navigation.select_date(target)

        assert navigation.current_view is CalendarView.DAY
        assert navigation.selected_date == target
        assert navigation.week_start == datetime.date(2025, 3, 16)

    def test_select_none_is_noop(self, navigation):
        """Test that selecting nothing changes nothing."""
        before = (navigation.current_view, navigation.selected_date)
        navigation.select_date(None)
        assert (navigation.current_view, navigation.selected_date) == before

    def test_shift_week_moves_selection(self, navigation):
        """Test that shifting the week moves the selection."""
        navigation.shift_week(-1)
        assert navigation.week_start == datetime.date(2025, 2, 23)
        assert navigation.selected_date == datetime.date(2025, 2, 24)
        assert navigation.selected_day_index == 2

    def test_week_start_must_be_sunday(self):
        """Test that week_start must be a Sunday."""
        with pytest.raises(ValueError, match="Sunday"):
            NavigationState(selected_date=datetime.date(2025, 3, 4), week_start=datetime.date(2025, 3, 3))


# ==================== Response Tests ====================

class TestResponses:
    """Tests for service response models."""

    def test_schedule_response_success_requires_schedule(self):
        """Test that success requires a schedule."""
        assert ScheduleResponse(status="success", schedule={}).is_success()
        assert not ScheduleResponse(status="success").is_success()
        assert not ScheduleResponse(status="fail", message="boom").is_success()

    def test_month_cell_overflow_label(self):
        """Test the month cell overflow label."""
        assert MonthCell(date=datetime.date(2025, 3, 1), overflow=2).overflow_label == "+2 more"
        assert MonthCell().is_blank
        assert MonthCell().overflow_label == ""

    def test_skipped_entry_str(self):
        """Test string form of a skipped entry."""
        assert str(SkippedEntry("Xyz 9", "unknown day", 3)) == "Entry 3 - 'Xyz 9': unknown day"
