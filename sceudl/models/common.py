# File: sceudl/models/common.py

from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with minute resolution."""
    hour: int
    minute: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Minute out of range: {self.minute}")

    def to_minutes(self) -> int:
        """Minutes since midnight."""
        return self.hour * 60 + self.minute

    @classmethod
    def from_minutes(cls, minutes: int) -> 'TimeOfDay':
        """Build from minutes since midnight, which must fall within one day."""
        minutes = int(minutes)
        if not 0 <= minutes < MINUTES_PER_DAY:
            raise ValueError(f"Minutes out of range: {minutes}")
        return cls(minutes // 60, minutes % 60)

    @classmethod
    def parse(cls, value: str) -> 'TimeOfDay':
        """Parse an "HH:MM" string."""
        hours, sep, minutes = str(value).strip().partition(':')
        if not sep:
            raise ValueError(f"Invalid time string: {value!r}")
        try:
            return cls(int(hours), int(minutes))
        except ValueError:
            raise ValueError(f"Invalid time string: {value!r}") from None

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def coerce_time(value) -> TimeOfDay:
    """Accept a TimeOfDay or an "HH:MM" string."""
    if isinstance(value, TimeOfDay):
        return value
    return TimeOfDay.parse(value)
