# File: sceudl/core/resize_controller.py
"""
Resize controller.
Moves one edge of an event, writing every valid pointer move straight to the
store. A move that would collapse or invert the event is ignored.
"""

from sceudl.core.config_manager import Config
from sceudl.core.event_store import EventStore
from sceudl.core.geometry import offset_to_minutes, snap, in_day
from sceudl.utils.logger import setup_logger
from sceudl.models import (
    ContainerGeometry, ResizeEdge, ResizeSession, TimeOfDay
)

logger = setup_logger(__name__)


class ResizeController:
    """Applies edge drags to events."""

    def __init__(
        self,
        store: EventStore,
        pixels_per_hour: float = Config.PIXELS_PER_HOUR,
        snap_minutes: int = Config.SNAP_MINUTES
    ):
        self.store = store
        self.pixels_per_hour = pixels_per_hour
        self.snap_minutes = snap_minutes

    def start(self, event_id: int, edge: ResizeEdge) -> ResizeSession:
        """Open a resize session on pointer-down over an edge handle."""
        edge = ResizeEdge(edge)
        event = self.store.get(event_id)
        logger.debug(f"Resize start on event {event_id} ({edge.value} edge)")
        return ResizeSession(event=event, edge=edge)

    def move(self, session: ResizeSession, client_y: float, container: ContainerGeometry) -> bool:
        """
        Pointer moved while resizing.

        Returns:
            True if the store was updated
        """
        candidate = snap(
            offset_to_minutes(container.local_y(client_y), self.pixels_per_hour),
            self.snap_minutes
        )
        if not in_day(candidate):
            return False

        # Live writes mean the stored event is the current truth
        current = self.store.get(session.event.id)
        start = current.start_time.to_minutes()
        end = current.end_time.to_minutes()

        if session.edge is ResizeEdge.TOP:
            if candidate >= end or candidate == start:
                return False
            patch = {'start_time': TimeOfDay.from_minutes(candidate)}
        else:
            if candidate <= start or candidate == end:
                return False
            patch = {'end_time': TimeOfDay.from_minutes(candidate)}

        session.event = self.store.update(current.id, **patch)
        return True
