# File: sceudl/core/event_store.py
"""
Event store: the single source of truth for the calendar's events.
"""

import dataclasses
from typing import Dict, Iterable, Iterator, List, Optional

from sceudl.utils.logger import setup_logger
from sceudl.models import (
    CalendarEvent, DuplicateIdError, EventNotFoundError, InvalidRangeError, coerce_time
)

logger = setup_logger(__name__)

# Fields a patch may touch; id is stable for the event's lifetime
PATCHABLE_FIELDS = frozenset(
    f.name for f in dataclasses.fields(CalendarEvent) if f.name != 'id'
)


class EventStore:
    """Ordered collection of calendar events keyed by id."""

    def __init__(self, events: Optional[Iterable[CalendarEvent]] = None):
        self._events: Dict[int, CalendarEvent] = {}
        self._next_id = 1
        for event in events or []:
            self.add(event)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[CalendarEvent]:
        return iter(list(self._events.values()))

    def __contains__(self, event_id: int) -> bool:
        return event_id in self._events

    def _allocate_id(self) -> int:
        event_id = self._next_id
        self._next_id += 1
        return event_id

    def add(self, event: CalendarEvent) -> CalendarEvent:
        """
        Append an event.

        Args:
            event: Event to store; a fresh id is assigned when event.id is None

        Returns:
            The stored event

        Raises:
            DuplicateIdError: If the id is already present
        """
        if event.id is None:
            event = dataclasses.replace(event, id=self._allocate_id())
        elif event.id in self._events:
            raise DuplicateIdError(event.id)

        self._events[event.id] = event
        # Keep the counter above every id seen so far
        self._next_id = max(self._next_id, event.id + 1)
        logger.debug(f"Added event {event.id} '{event.title}' on day {event.day}")
        return event

    def get(self, event_id: int) -> CalendarEvent:
        """Return the event with the given id, or raise EventNotFoundError."""
        try:
            return self._events[event_id]
        except KeyError:
            raise EventNotFoundError(event_id) from None

    def update(self, event_id: int, **patch) -> CalendarEvent:
        """
        Apply a partial change to one event.

        Args:
            event_id: Id of the event to change
            **patch: Field values to replace (e.g. day=3, start_time=...)

        Returns:
            The updated event

        Raises:
            EventNotFoundError: If the id is absent
            InvalidRangeError: If the result would violate start_time < end_time
            ValueError: If the patch names id or an unknown field
        """
        current = self.get(event_id)

        unknown = set(patch) - PATCHABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot patch field(s): {', '.join(sorted(unknown))}")

        for key in ('start_time', 'end_time'):
            if key in patch:
                patch[key] = coerce_time(patch[key])
        start = patch.get('start_time', current.start_time)
        end = patch.get('end_time', current.end_time)
        if end <= start:
            raise InvalidRangeError(
                f"Rejected update of event {event_id}: {start} - {end} is not a valid range"
            )

        updated = dataclasses.replace(current, **patch)

        # Replacing in place keeps insertion order
        self._events[event_id] = updated
        return updated

    def remove(self, event_id: int) -> CalendarEvent:
        """Remove and return an event."""
        event = self.get(event_id)
        del self._events[event_id]
        logger.debug(f"Removed event {event_id} '{event.title}'")
        return event

    def get_by_day(self, day: int) -> List[CalendarEvent]:
        """Events on the given day index, in insertion order."""
        return [e for e in self._events.values() if e.day == day]

    def all(self) -> List[CalendarEvent]:
        """All events in insertion order."""
        return list(self._events.values())

    def bulk_import(self, events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
        """
        Store imported events under fresh, non-colliding ids.

        Args:
            events: Parsed class or study-plan events; their ids are ignored

        Returns:
            The stored events
        """
        self._next_id = max([self._next_id] + [eid + 1 for eid in self._events])
        stored = [
            self.add(dataclasses.replace(event, id=self._allocate_id()))
            for event in events
        ]
        logger.info(f"Imported {len(stored)} events ({len(self)} total)")
        return stored

    def clear(self) -> None:
        """Drop every event. The id counter keeps counting."""
        self._events.clear()
