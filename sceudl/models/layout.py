# File: sceudl/models/layout.py
"""
Data models for composed calendar views.
A renderer paints these; nothing here holds behaviour.
"""

import datetime
from dataclasses import dataclass, field
from typing import List, Optional

from .calendar import CalendarEvent
from .enums import CalendarView
from .geometry import EventStyle
from .session import DragPreview

@dataclass
class EventPlacement:
    """An event block positioned inside a day column."""
    event: CalendarEvent
    style: EventStyle
    is_dragging: bool = False  # rendered with reduced opacity


@dataclass
class PreviewPlacement:
    """The drag preview block for a column."""
    title: str
    preview: DragPreview
    style: EventStyle

    @property
    def label(self) -> str:
        return self.preview.time_range


@dataclass
class DayColumn:
    """One day column of the day or week view."""
    day_index: int
    label: str
    date: datetime.date
    is_selected: bool = False
    highlighted: bool = False
    placements: List[EventPlacement] = field(default_factory=list)
    preview: Optional[PreviewPlacement] = None


@dataclass
class TimeGridLayout:
    """Day or week view: hour rows plus one or seven columns."""
    view: CalendarView
    hour_labels: List[str]
    columns: List[DayColumn]
    title: str
    row_height: float


@dataclass
class MonthCell:
    """A month grid cell; date is None for the leading/trailing blanks."""
    date: Optional[datetime.date] = None
    events: List[CalendarEvent] = field(default_factory=list)
    overflow: int = 0
    is_selected: bool = False

    @property
    def is_blank(self) -> bool:
        return self.date is None

    @property
    def overflow_label(self) -> str:
        return f"+{self.overflow} more" if self.overflow > 0 else ""


@dataclass
class MonthLayout:
    """Month view: weekday header and rows of seven cells."""
    title: str
    weekday_labels: List[str]
    rows: List[List[MonthCell]]

    @property
    def cells(self) -> List[MonthCell]:
        return [cell for row in self.rows for cell in row]
