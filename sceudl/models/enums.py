# File: sceudl/models/enums.py

from enum import Enum

class EventColor(Enum):
    """Presentation palette for event blocks."""
    CYAN = "cyan"
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    ORANGE = "orange"
    PINK = "pink"
    INDIGO = "indigo"
    TEAL = "teal"
    RED = "red"
    YELLOW = "yellow"


class ResizeEdge(Enum):
    """Which boundary of an event block is being dragged."""
    TOP = "top"        # start time
    BOTTOM = "bottom"  # end time


class CalendarView(Enum):
    """Calendar display modes."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class DragOutcome(Enum):
    """How a drag gesture terminated."""
    COMMITTED = "committed"
    CANCELLED = "cancelled"
