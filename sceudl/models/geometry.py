# File: sceudl/models/geometry.py
"""
Pixel-space value types shared by the geometry engine and gesture controllers.
All y values are client coordinates unless noted otherwise.
"""

from dataclasses import dataclass

@dataclass(frozen=True)
class Point:
    """Pointer position."""
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Bounding box of a rendered element."""
    left: float
    top: float
    width: float = 0.0
    height: float = 0.0

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class ContainerGeometry:
    """
    Geometry of one day column, injected by the renderer on every callback.

    Attributes:
        day: Day index hosted by the column (1..7)
        top: Client y of the column's top edge
        scroll_top: Current scroll offset of the column
    """
    day: int
    top: float = 0.0
    scroll_top: float = 0.0

    def __post_init__(self):
        if not 1 <= self.day <= 7:
            raise ValueError(f"Column day index must be 1..7, got {self.day}")

    def local_y(self, client_y: float) -> float:
        """Convert a client y into an offset from midnight within the column."""
        return client_y - self.top + self.scroll_top

    def client_y(self, local_y: float) -> float:
        """Inverse of local_y."""
        return local_y + self.top - self.scroll_top


@dataclass(frozen=True)
class EventStyle:
    """Vertical placement of an event block inside its column, in pixels."""
    top: float
    height: float

    def to_css(self) -> dict:
        return {'top': f"{self.top:g}px", 'height': f"{self.height:g}px"}
