# File: sceudl/models/navigation.py

import datetime
from dataclasses import dataclass, field
from typing import List, Optional

from .enums import CalendarView


def week_start_for(date: datetime.date) -> datetime.date:
    """Sunday on or before the given date."""
    # date.weekday(): Monday=0 .. Sunday=6
    return date - datetime.timedelta(days=(date.weekday() + 1) % 7)


@dataclass
class NavigationState:
    """
    Process-wide UI selection: which view is shown, which week is active and
    which date is selected. Changing it never touches the event store.
    """
    current_view: CalendarView = CalendarView.WEEK
    selected_date: datetime.date = field(default_factory=datetime.date.today)
    week_start: Optional[datetime.date] = None

    def __post_init__(self):
        if isinstance(self.current_view, str):
            self.current_view = CalendarView(self.current_view)
        if self.week_start is None:
            self.week_start = week_start_for(self.selected_date)
        elif self.week_start.weekday() != 6:
            raise ValueError(f"Week must start on a Sunday: {self.week_start}")

    def week_dates(self) -> List[datetime.date]:
        """The seven contiguous dates of the active week."""
        return [self.week_start + datetime.timedelta(days=i) for i in range(7)]

    def day_index_of(self, date: datetime.date) -> Optional[int]:
        """Day index (1..7) of a date within the active week, else None."""
        delta = (date - self.week_start).days
        return delta + 1 if 0 <= delta < 7 else None

    def date_of(self, day_index: int) -> datetime.date:
        """Date of a day index in the active week."""
        if not 1 <= day_index <= 7:
            raise ValueError(f"Day index must be 1..7: {day_index}")
        return self.week_start + datetime.timedelta(days=day_index - 1)

    @property
    def selected_day_index(self) -> Optional[int]:
        return self.day_index_of(self.selected_date)

    def switch_view(self, view: CalendarView) -> None:
        self.current_view = CalendarView(view)

    def select_date(self, date: Optional[datetime.date]) -> None:
        """Select a date and open it in the day view, moving the week if needed."""
        if date is None:
            return
        self.selected_date = date
        self.week_start = week_start_for(date)
        self.current_view = CalendarView.DAY

    def shift_week(self, weeks: int) -> None:
        """Move the active week (and the selection with it)."""
        delta = datetime.timedelta(weeks=weeks)
        self.week_start += delta
        self.selected_date += delta
