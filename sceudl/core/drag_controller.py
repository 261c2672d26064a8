# File: sceudl/core/drag_controller.py
"""
Drag controller.
Relocates one event: tracks a snapped preview while the pointer moves over
day columns and writes day/start/end to the store in one update on drop.
"""

from typing import Optional

from sceudl.core.config_manager import Config
from sceudl.core.event_store import EventStore
from sceudl.core.geometry import offset_to_minutes, snap, in_day
from sceudl.utils.logger import setup_logger
from sceudl.models import (
    CalendarEvent, ContainerGeometry, DragPreview, DragSession,
    EventNotFoundError, Point, Rect, TimeOfDay
)

logger = setup_logger(__name__)


class DragController:
    """Computes drag previews and commits drops."""

    def __init__(
        self,
        store: EventStore,
        pixels_per_hour: float = Config.PIXELS_PER_HOUR,
        snap_minutes: int = Config.SNAP_MINUTES
    ):
        self.store = store
        self.pixels_per_hour = pixels_per_hour
        self.snap_minutes = snap_minutes

    def start(self, event_id: int, pointer: Point, block_rect: Rect) -> DragSession:
        """
        Open a drag session on pointer-down over an event block.

        Args:
            event_id: Id of the grabbed event
            pointer: Pointer position at pointer-down
            block_rect: Bounding box of the event block at that instant

        Returns:
            New DragSession; the grab offset stays fixed for the gesture
        """
        event = self.store.get(event_id)
        grab_offset = Point(pointer.x - block_rect.left, pointer.y - block_rect.top)
        logger.debug(f"Drag start on event {event_id} with grab offset {grab_offset}")
        return DragSession(event=event, grab_offset=grab_offset)

    def candidate(
        self,
        session: DragSession,
        client_y: float,
        container: ContainerGeometry
    ) -> Optional[DragPreview]:
        """
        Compute the placement for a pointer position, or None if it would
        leave the day.
        """
        block_top = container.local_y(client_y) - session.grab_offset.y
        start = snap(offset_to_minutes(block_top, self.pixels_per_hour), self.snap_minutes)
        end = start + session.duration_minutes

        if not (in_day(start) and in_day(end)):
            return None

        return DragPreview(
            day=container.day,
            start_time=TimeOfDay.from_minutes(start),
            end_time=TimeOfDay.from_minutes(end)
        )

    def move(
        self,
        session: DragSession,
        client_y: float,
        container: ContainerGeometry
    ) -> Optional[DragPreview]:
        """
        Pointer moved over a day column.

        The preview is replaced only by an in-range candidate; an out-of-range
        one leaves the previous preview untouched.

        Returns:
            The session's current preview
        """
        session.hovered_day = container.day
        preview = self.candidate(session, client_y, container)
        if preview is not None:
            session.preview = preview
        return session.preview

    def leave(self, session: DragSession) -> None:
        """Pointer left the hovered column."""
        session.hovered_day = None
        session.preview = None

    def commit(self, session: DragSession) -> Optional[CalendarEvent]:
        """
        Write the preview to the store.

        Returns:
            The updated event, or None when the drag is cancelled instead
        """
        preview = session.preview
        if preview is None:
            logger.debug(f"Drag of event {session.event.id} cancelled: no valid drop target")
            return None

        try:
            updated = self.store.update(
                session.event.id,
                day=preview.day,
                start_time=preview.start_time,
                end_time=preview.end_time
            )
        except (EventNotFoundError, ValueError) as e:
            logger.warning(f"Drop of event {session.event.id} discarded: {e}")
            return None

        logger.info(
            f"Moved '{updated.title}' to day {updated.day} {updated.time_range}"
        )
        return updated
