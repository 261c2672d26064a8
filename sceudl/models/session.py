# File: sceudl/models/session.py
"""
Ephemeral gesture state.

The calendar controller holds exactly one of Idle, Dragging or Resizing at a
time; the session inside the variant owns mutation rights over its event until
the gesture ends.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .calendar import CalendarEvent
from .common import TimeOfDay
from .enums import ResizeEdge
from .geometry import Point

@dataclass(frozen=True)
class DragPreview:
    """Tentative placement shown while dragging."""
    day: int
    start_time: TimeOfDay
    end_time: TimeOfDay

    @property
    def time_range(self) -> str:
        return f"{self.start_time} - {self.end_time}"


@dataclass
class DragSession:
    """An in-progress relocation of one event."""
    event: CalendarEvent
    grab_offset: Point
    preview: Optional[DragPreview] = None
    hovered_day: Optional[int] = None

    @property
    def duration_minutes(self) -> int:
        """Duration captured at drag start; preserved on drop."""
        return self.event.duration_minutes()


@dataclass
class ResizeSession:
    """An in-progress boundary edit of one event."""
    event: CalendarEvent
    edge: ResizeEdge


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True)
class Dragging:
    session: DragSession


@dataclass(frozen=True)
class Resizing:
    session: ResizeSession


GestureState = Union[Idle, Dragging, Resizing]
