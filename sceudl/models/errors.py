# File: sceudl/models/errors.py
"""
Exceptions raised by the event store.
"""


class CalendarError(Exception):
    """Base class for event store failures."""


class DuplicateIdError(CalendarError, KeyError):
    """An event with the same id is already stored."""

    def __init__(self, event_id):
        super().__init__(f"Event id already present: {event_id}")
        self.event_id = event_id


class EventNotFoundError(CalendarError, KeyError):
    """No event with the requested id."""

    def __init__(self, event_id):
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class InvalidRangeError(CalendarError, ValueError):
    """A change would leave an event with start_time >= end_time."""
