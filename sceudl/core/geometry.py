# File: sceudl/core/geometry.py
"""
Time-geometry engine.
Pure functions mapping wall-clock time to vertical pixel offsets within a
day column, and snapping free-form minutes to the grid.
"""

import math

from sceudl.core.config_manager import Config
from sceudl.models import TimeOfDay, EventStyle, MINUTES_PER_DAY


def time_to_offset(time: TimeOfDay, pixels_per_hour: float = Config.PIXELS_PER_HOUR) -> float:
    """
    Map a time of day to its pixel offset from midnight.

    Args:
        time: Time of day
        pixels_per_hour: Height of one hour row

    Returns:
        Offset in pixels, (hour + minute/60) * pixels_per_hour
    """
    return (time.hour + time.minute / 60) * pixels_per_hour


def offset_to_minutes(offset: float, pixels_per_hour: float = Config.PIXELS_PER_HOUR) -> float:
    """Map a pixel offset to minutes since midnight, without clamping."""
    if pixels_per_hour <= 0:
        raise ValueError(f"pixels_per_hour must be positive: {pixels_per_hour}")
    return offset / pixels_per_hour * 60


def offset_to_time(offset: float, pixels_per_hour: float = Config.PIXELS_PER_HOUR) -> float:
    """
    Inverse of time_to_offset.

    Args:
        offset: Pixel offset from midnight
        pixels_per_hour: Height of one hour row

    Returns:
        Minutes since midnight clamped into [0, 1440)
    """
    minutes = offset_to_minutes(offset, pixels_per_hour)
    # Largest representable value below midnight
    upper = math.nextafter(MINUTES_PER_DAY, 0)
    return min(max(minutes, 0.0), upper)


def snap(minutes: float, granularity: int = Config.SNAP_MINUTES) -> int:
    """
    Round minutes to the nearest multiple of granularity, ties rounding up.

    snap(7) == 0, snap(7.5) == 15, snap(snap(x)) == snap(x).
    """
    if granularity <= 0:
        raise ValueError(f"granularity must be positive: {granularity}")
    return int(math.floor(minutes / granularity + 0.5)) * granularity


def style_for(
    start_time: TimeOfDay,
    end_time: TimeOfDay,
    pixels_per_hour: float = Config.PIXELS_PER_HOUR
) -> EventStyle:
    """
    Compute the block placement for an event.

    Raises:
        ValueError: If end_time is not after start_time
    """
    if end_time <= start_time:
        raise ValueError(f"Cannot place a block ending at {end_time} before its start {start_time}")
    top = time_to_offset(start_time, pixels_per_hour)
    height = time_to_offset(end_time, pixels_per_hour) - top
    return EventStyle(top=top, height=height)


def in_day(minutes: float) -> bool:
    """True when minutes since midnight fall within [0, 1440)."""
    return 0 <= minutes < MINUTES_PER_DAY
