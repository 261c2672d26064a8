# File: sceudl/models/calendar.py

from dataclasses import dataclass, field
from typing import List, Optional

from .common import TimeOfDay, coerce_time
from .enums import EventColor

@dataclass
class CalendarEvent:
    """Represents an event block in the active week."""
    title: str
    start_time: TimeOfDay
    end_time: TimeOfDay
    day: int
    color: EventColor = EventColor.CYAN
    id: Optional[int] = None
    description: str = ""
    location: str = ""
    organizer: str = ""
    attendees: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate event data."""
        self.start_time = coerce_time(self.start_time)
        self.end_time = coerce_time(self.end_time)
        if isinstance(self.color, str):
            self.color = EventColor(self.color)
        if not 1 <= self.day <= 7:
            raise ValueError(f"Day index must be 1..7: {self.title} (day={self.day})")
        if self.end_time <= self.start_time:
            raise ValueError(f"Event end time must be after start time: {self.title}")

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return self.end_time.to_minutes() - self.start_time.to_minutes()

    def overlaps_with(self, other: 'CalendarEvent') -> bool:
        """Check if this event overlaps with another on the same day."""
        return (
            self.day == other.day
            and self.start_time < other.end_time
            and self.end_time > other.start_time
        )

    @property
    def time_range(self) -> str:
        """Display label, e.g. "09:00 - 10:00"."""
        return f"{self.start_time} - {self.end_time}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'title': self.title,
            'startTime': str(self.start_time),
            'endTime': str(self.end_time),
            'day': self.day,
            'color': self.color.value,
            'description': self.description,
            'location': self.location,
            'organizer': self.organizer,
            'attendees': list(self.attendees),
        }


def event_from_dict(data: dict) -> CalendarEvent:
    """Create CalendarEvent from a dictionary using camelCase or snake_case keys."""
    raw_color = data.get('color', EventColor.CYAN.value)
    try:
        color = EventColor(raw_color) if isinstance(raw_color, str) else raw_color
    except ValueError:
        color = EventColor.CYAN

    raw_id = data.get('id')
    return CalendarEvent(
        id=int(raw_id) if raw_id is not None else None,
        title=str(data.get('title', 'Untitled Event')),
        start_time=coerce_time(data.get('startTime', data.get('start_time'))),
        end_time=coerce_time(data.get('endTime', data.get('end_time'))),
        day=int(data['day']),
        color=color,
        description=str(data.get('description', '')),
        location=str(data.get('location', '')),
        organizer=str(data.get('organizer', '')),
        attendees=[str(a) for a in data.get('attendees', [])],
    )
