# File: sceudl/core/calendar_controller.py
"""
Calendar controller.

Owns the single gesture state of the grid (Idle, Dragging or Resizing) and
routes pointer callbacks to the drag and resize controllers. Every container
geometry is passed in by the caller, so the whole interaction can run without
a rendering surface.
"""

from typing import Optional

from sceudl.core.config_manager import Config
from sceudl.core.event_store import EventStore
from sceudl.core.drag_controller import DragController
from sceudl.core.resize_controller import ResizeController
from sceudl.core.geometry import offset_to_time, snap, style_for, time_to_offset
from sceudl.utils.logger import setup_logger
from sceudl.models import (
    CalendarEvent, ContainerGeometry, DragOutcome, DragSession, EventColor,
    GestureState, Idle, Dragging, Resizing, ResizeEdge, ResizeSession,
    Point, Rect, TimeOfDay, MINUTES_PER_DAY
)

logger = setup_logger(__name__)


class CalendarController:
    """Single owner of the grid's gesture state."""

    def __init__(
        self,
        store: EventStore,
        pixels_per_hour: float = Config.PIXELS_PER_HOUR,
        snap_minutes: int = Config.SNAP_MINUTES
    ):
        self.store = store
        self.pixels_per_hour = pixels_per_hour
        self.snap_minutes = snap_minutes
        self.drag = DragController(store, pixels_per_hour, snap_minutes)
        self.resize = ResizeController(store, pixels_per_hour, snap_minutes)
        self.state: GestureState = Idle()

    # ------------------------------------------------------------------
    # State inspection
    # ------------------------------------------------------------------

    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    @property
    def active_drag(self) -> Optional[DragSession]:
        return self.state.session if isinstance(self.state, Dragging) else None

    @property
    def active_resize(self) -> Optional[ResizeSession]:
        return self.state.session if isinstance(self.state, Resizing) else None

    def _terminate(self) -> None:
        """End whatever gesture is active without committing a drag."""
        if isinstance(self.state, Dragging):
            logger.debug(f"Drag of event {self.state.session.event.id} cancelled")
        elif isinstance(self.state, Resizing):
            logger.debug(f"Resize of event {self.state.session.event.id} ended")
        self.state = Idle()

    # ------------------------------------------------------------------
    # Drag
    # ------------------------------------------------------------------

    def begin_drag(self, event_id: int, pointer: Point, block_rect: Rect) -> DragSession:
        """Pointer-down on an event block."""
        self._terminate()
        session = self.drag.start(event_id, pointer, block_rect)
        self.state = Dragging(session)
        return session

    def drag_over(self, client_y: float, container: ContainerGeometry):
        """Pointer moved over a day column during a drag."""
        session = self.active_drag
        if session is None:
            return None
        return self.drag.move(session, client_y, container)

    def drag_leave(self) -> None:
        """Pointer left the hovered day column."""
        session = self.active_drag
        if session is not None:
            self.drag.leave(session)

    def drop(self, client_y: float, container: ContainerGeometry) -> Optional[DragOutcome]:
        """
        Drop over a day column.

        Returns:
            COMMITTED or CANCELLED, or None if no drag was active
        """
        session = self.active_drag
        if session is None:
            return None

        try:
            self.drag.move(session, client_y, container)
            updated = self.drag.commit(session)
        finally:
            self.state = Idle()
        return DragOutcome.COMMITTED if updated is not None else DragOutcome.CANCELLED

    # ------------------------------------------------------------------
    # Resize
    # ------------------------------------------------------------------

    def begin_resize(self, event_id: int, edge: ResizeEdge) -> ResizeSession:
        """Pointer-down on an edge handle."""
        self._terminate()
        session = self.resize.start(event_id, edge)
        self.state = Resizing(session)
        return session

    def resize_move(self, client_y: float, container: ContainerGeometry) -> bool:
        """Pointer moved during a resize; True if the event changed."""
        session = self.active_resize
        if session is None:
            return False
        return self.resize.move(session, client_y, container)

    # ------------------------------------------------------------------
    # Global release
    # ------------------------------------------------------------------

    def pointer_up(
        self,
        client_y: Optional[float] = None,
        container: Optional[ContainerGeometry] = None
    ) -> Optional[DragOutcome]:
        """
        Pointer released anywhere. Always returns the controller to Idle.

        Args:
            client_y: Release position, when known
            container: Day column under the pointer, or None outside any column

        Returns:
            The drag outcome if a drag was active, else None
        """
        if isinstance(self.state, Dragging):
            if container is not None and client_y is not None:
                return self.drop(client_y, container)
            self._terminate()
            return DragOutcome.CANCELLED

        self._terminate()
        return None

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------

    def block_rect(
        self,
        event: CalendarEvent,
        container: ContainerGeometry,
        left: float = 0.0,
        width: float = 0.0
    ) -> Rect:
        """Client-space bounding box of an event block inside a column."""
        style = style_for(event.start_time, event.end_time, self.pixels_per_hour)
        return Rect(
            left=left,
            top=container.client_y(style.top),
            width=width,
            height=style.height
        )

    def create_event_at(
        self,
        client_y: float,
        container: ContainerGeometry,
        title: str,
        duration_minutes: int = Config.DEFAULT_EVENT_MINUTES,
        color: EventColor = EventColor.CYAN,
        **details
    ) -> CalendarEvent:
        """
        Manual add: place a new event at the clicked, snapped time.

        The start is clamped into the day and the duration trimmed so the event
        ends before midnight.
        """
        if duration_minutes <= 0:
            raise ValueError(f"Duration must be positive: {duration_minutes}")

        minutes = offset_to_time(container.local_y(client_y), self.pixels_per_hour)
        last_start = MINUTES_PER_DAY - self.snap_minutes
        start = min(snap(minutes, self.snap_minutes), last_start)
        end = min(start + duration_minutes, MINUTES_PER_DAY - 1)

        event = CalendarEvent(
            title=title,
            start_time=TimeOfDay.from_minutes(start),
            end_time=TimeOfDay.from_minutes(end),
            day=container.day,
            color=color,
            **details
        )
        stored = self.store.add(event)
        logger.info(f"Created '{stored.title}' on day {stored.day} {stored.time_range}")
        return stored

    def offset_for(self, time: TimeOfDay, container: ContainerGeometry) -> float:
        """Client y of a time of day inside a column."""
        return container.client_y(time_to_offset(time, self.pixels_per_hour))
