from .enums import EventColor, ResizeEdge, CalendarView, DragOutcome
from .common import TimeOfDay, coerce_time, MINUTES_PER_DAY
from .calendar import CalendarEvent, event_from_dict
from .geometry import Point, Rect, ContainerGeometry, EventStyle
from .session import (
    DragPreview, DragSession, ResizeSession,
    Idle, Dragging, Resizing, GestureState
)
from .layout import (
    EventPlacement, PreviewPlacement, DayColumn,
    TimeGridLayout, MonthCell, MonthLayout
)
from .navigation import NavigationState, week_start_for
from .errors import CalendarError, DuplicateIdError, EventNotFoundError, InvalidRangeError
from .api import StudyPlan, ScheduleResponse, PdfIngestionResponse, SkippedEntry

__all__ = [
    "EventColor",
    "ResizeEdge",
    "CalendarView",
    "DragOutcome",
    "TimeOfDay",
    "coerce_time",
    "MINUTES_PER_DAY",
    "CalendarEvent",
    "event_from_dict",
    "Point",
    "Rect",
    "ContainerGeometry",
    "EventStyle",
    "DragPreview",
    "DragSession",
    "ResizeSession",
    "Idle",
    "Dragging",
    "Resizing",
    "GestureState",
    "EventPlacement",
    "PreviewPlacement",
    "DayColumn",
    "TimeGridLayout",
    "MonthCell",
    "MonthLayout",
    "NavigationState",
    "week_start_for",
    "CalendarError",
    "DuplicateIdError",
    "EventNotFoundError",
    "InvalidRangeError",
    "StudyPlan",
    "ScheduleResponse",
    "PdfIngestionResponse",
    "SkippedEntry"
]
