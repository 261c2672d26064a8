# File: sceudl/core/view_composer.py
"""
View composer.
Derives day, week and month layouts from the event store, the navigation
state and the current gesture. Composing a view never mutates the store.
"""

import calendar
import datetime
from typing import List, Optional

from sceudl.core.config_manager import Config
from sceudl.core.event_store import EventStore
from sceudl.core.geometry import style_for
from sceudl.utils.logger import setup_logger
from sceudl.models import (
    CalendarView, DayColumn, EventPlacement, MonthCell, MonthLayout,
    NavigationState, PreviewPlacement, TimeGridLayout, DragSession, GestureState,
    Dragging
)

logger = setup_logger(__name__)


def format_hour_label(hour: int) -> str:
    """Row label for an hour of the day, e.g. 0 -> "12 AM", 13 -> "1 PM"."""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


class ViewComposer:
    """Builds renderable layouts for the three calendar views."""

    def __init__(
        self,
        store: EventStore,
        navigation: NavigationState,
        pixels_per_hour: float = Config.PIXELS_PER_HOUR
    ):
        self.store = store
        self.navigation = navigation
        self.pixels_per_hour = pixels_per_hour

    def compose(self, gesture: Optional[GestureState] = None):
        """Layout for whichever view is currently selected."""
        view = self.navigation.current_view
        if view is CalendarView.DAY:
            return self.day_view(gesture)
        if view is CalendarView.WEEK:
            return self.week_view(gesture)
        return self.month_view()

    def _hour_labels(self) -> List[str]:
        return [format_hour_label(hour) for hour in range(24)]

    def _column(self, day_index: int, drag: Optional[DragSession]) -> DayColumn:
        """One day column with its events, preview and highlight."""
        nav = self.navigation
        date = nav.date_of(day_index)
        dragged_id = drag.event.id if drag else None

        placements = [
            EventPlacement(
                event=event,
                style=style_for(event.start_time, event.end_time, self.pixels_per_hour),
                is_dragging=event.id == dragged_id
            )
            for event in self.store.get_by_day(day_index)
        ]

        preview = None
        if drag and drag.preview and drag.preview.day == day_index:
            preview = PreviewPlacement(
                title=drag.event.title,
                preview=drag.preview,
                style=style_for(drag.preview.start_time, drag.preview.end_time, self.pixels_per_hour)
            )

        return DayColumn(
            day_index=day_index,
            label=Config.WEEKDAY_LABELS[day_index - 1],
            date=date,
            is_selected=date == nav.selected_date,
            highlighted=drag is not None and drag.hovered_day == day_index,
            placements=placements,
            preview=preview
        )

    @staticmethod
    def _drag_of(gesture: Optional[GestureState]) -> Optional[DragSession]:
        return gesture.session if isinstance(gesture, Dragging) else None

    def day_view(self, gesture: Optional[GestureState] = None) -> TimeGridLayout:
        """Single column for the selected day."""
        nav = self.navigation
        day_index = nav.selected_day_index
        if day_index is None:
            raise ValueError(
                f"Selected date {nav.selected_date} is outside the week of {nav.week_start}"
            )

        column = self._column(day_index, self._drag_of(gesture))
        return TimeGridLayout(
            view=CalendarView.DAY,
            hour_labels=self._hour_labels(),
            columns=[column],
            title=f"{nav.selected_date:%B} {nav.selected_date.day}",
            row_height=self.pixels_per_hour
        )

    def week_view(self, gesture: Optional[GestureState] = None) -> TimeGridLayout:
        """Seven columns for the active week, each a separate drop target."""
        drag = self._drag_of(gesture)
        columns = [self._column(day_index, drag) for day_index in range(1, 8)]
        return TimeGridLayout(
            view=CalendarView.WEEK,
            hour_labels=self._hour_labels(),
            columns=columns,
            title=self.navigation.week_start.strftime("%B %Y"),
            row_height=self.pixels_per_hour
        )

    def month_view(self) -> MonthLayout:
        """
        Month grid for the selected date's month.

        Leading blank cells cover the weekdays before the 1st; the last row is
        padded with blanks. Each cell lists up to MONTH_CELL_EVENT_LIMIT events
        and counts the rest as overflow.
        """
        nav = self.navigation
        year, month = nav.selected_date.year, nav.selected_date.month
        first = datetime.date(year, month, 1)
        first_day_offset = (first.weekday() + 1) % 7  # Sunday-first grid
        days_in_month = calendar.monthrange(year, month)[1]
        limit = Config.MONTH_CELL_EVENT_LIMIT

        cells: List[MonthCell] = [MonthCell() for _ in range(first_day_offset)]
        for day_number in range(1, days_in_month + 1):
            date = datetime.date(year, month, day_number)
            day_index = nav.day_index_of(date)
            day_events = self.store.get_by_day(day_index) if day_index else []
            cells.append(MonthCell(
                date=date,
                events=day_events[:limit],
                overflow=max(len(day_events) - limit, 0),
                is_selected=date == nav.selected_date
            ))

        while len(cells) % 7:
            cells.append(MonthCell())

        rows = [cells[i:i + 7] for i in range(0, len(cells), 7)]
        logger.debug(f"Composed month view {first:%B %Y} with {len(rows)} rows")
        return MonthLayout(
            title=first.strftime("%B %Y"),
            weekday_labels=list(Config.WEEKDAY_LABELS),
            rows=rows
        )
