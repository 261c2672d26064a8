# File: sceudl/processors/import_processor.py
"""
Import processing module.
Converts class-time lines from the PDF backend and study plans from the
schedule generator into CalendarEvent objects. Bad entries are skipped one at
a time; the rest of the batch still imports.
"""

import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from sceudl.core.config_manager import Config
from sceudl.utils.logger import LoggerMixin
from sceudl.models import CalendarEvent, SkippedEntry, StudyPlan, TimeOfDay

FIELD_SEPARATOR = " - "
NO_SESSION_MARKERS = ("", "-")

_TIME_12H = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*([AaPp])\.?[Mm]\.?\s*$")
_TIME_24H = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")
_RANGE_SPLIT = re.compile(r'\s*[-–]\s*')


def convert_to_24_hour(value: str) -> TimeOfDay:
    """
    Convert "9:30 AM" / "12 PM" / "13:45" to a TimeOfDay.

    Raises:
        ValueError: If the string is not a recognizable time
    """
    match = _TIME_24H.match(str(value))
    if match:
        return TimeOfDay(int(match.group(1)), int(match.group(2)))

    match = _TIME_12H.match(str(value))
    if not match:
        raise ValueError(f"Unrecognized time: {value!r}")

    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    period = match.group(3).upper()
    if not 1 <= hour <= 12:
        raise ValueError(f"Hour out of range for 12-hour time: {value!r}")

    if period == "P" and hour != 12:
        hour += 12
    elif period == "A" and hour == 12:
        hour = 0

    return TimeOfDay(hour, minute)


def parse_time_range(value: str) -> Tuple[TimeOfDay, TimeOfDay]:
    """Parse "<start> - <end>" into two times."""
    parts = _RANGE_SPLIT.split(str(value).strip())
    if len(parts) != 2:
        raise ValueError(f"Expected '<start> - <end>': {value!r}")
    return convert_to_24_hour(parts[0]), convert_to_24_hour(parts[1])


def day_index_from_abbreviation(token: str) -> Optional[int]:
    """Map "Mon", "MON" or "Monday" to its day index."""
    return Config.DAY_ABBREVIATIONS.get(token.strip()[:3].title())


def course_name_of(line: str) -> Optional[str]:
    """Course field of a class-time line, if present."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) >= 3 and parts[2].strip():
        return parts[2].strip()
    return None


class ImportProcessor(LoggerMixin):
    """Builds events from class schedules and generated study plans."""

    def parse_class_time(self, line: str, index: int = 0, source_name: str = "") -> CalendarEvent:
        """
        Parse one class-time line.

        Format: "<DayAbbrev> <start> - <end> - <course> - <location>", e.g.
        "Mon 9:30 AM - 10:45 AM - CS 3080 - Hayes Hall 117". Course and
        location are optional.

        Raises:
            ValueError: If the line does not match the format
        """
        parts = [part.strip() for part in line.strip().split(FIELD_SEPARATOR)]
        if len(parts) < 2:
            raise ValueError("missing ' - ' between start and end time")

        day_token, _, start_text = parts[0].partition(" ")
        day = day_index_from_abbreviation(day_token)
        if day is None:
            raise ValueError(f"unknown day abbreviation {day_token!r}")

        start = convert_to_24_hour(start_text)
        end = convert_to_24_hour(parts[1])
        course = parts[2] if len(parts) >= 3 and parts[2] else "Class"
        location = parts[3] if len(parts) >= 4 and parts[3] else "TBD"

        return CalendarEvent(
            title=course,
            start_time=start,
            end_time=end,
            day=day,
            color=Config.CLASS_COLORS[index % len(Config.CLASS_COLORS)],
            description=f"Class from {source_name}" if source_name else "Class",
            location=location,
            organizer="University",
            attendees=[],
        )

    def parse_class_times(
        self,
        lines: Union[str, Iterable[str]],
        source_name: str = ""
    ) -> Tuple[List[CalendarEvent], List[SkippedEntry]]:
        """
        Parse a batch of class-time lines.

        Args:
            lines: One line per class, as a list or a newline-separated string
            source_name: Uploaded file name, used in the description

        Returns:
            Tuple of (events, skipped entries)
        """
        if isinstance(lines, str):
            lines = lines.splitlines()
        lines = [line for line in lines if line and line.strip()]

        events: List[CalendarEvent] = []
        skipped: List[SkippedEntry] = []

        for i, line in enumerate(lines):
            try:
                events.append(self.parse_class_time(line, len(events), source_name))
            except ValueError as e:
                skip = SkippedEntry(source=line, message=str(e), entry_index=i)
                skipped.append(skip)
                self.logger.warning(f"Skipping class line: {skip}")

        self.logger.info(f"Parsed {len(events)} class events ({len(skipped)} skipped)")
        return events, skipped

    def parse_study_plan(
        self,
        plan: StudyPlan,
        class_lines: Sequence[str] = ()
    ) -> Tuple[List[CalendarEvent], List[SkippedEntry]]:
        """
        Convert a generated study plan into study-session events.

        Args:
            plan: Weekday name -> "<start> - <end>" -> task label
            class_lines: Class-time lines already imported; slots naming one of
                their courses are left out

        Returns:
            Tuple of (events, skipped entries)
        """
        courses = [name for name in (course_name_of(line) for line in class_lines) if name]
        events: List[CalendarEvent] = []
        skipped: List[SkippedEntry] = []

        for day_name, slots in plan.items():
            day = Config.DAY_NAMES.get(str(day_name).strip().title())
            if day is None or not isinstance(slots, dict):
                skip = SkippedEntry(source=str(day_name), message="unknown weekday or malformed slots")
                skipped.append(skip)
                self.logger.warning(f"Skipping plan day: {skip}")
                continue

            for slot, task in slots.items():
                task = str(task or "").strip()
                if task in NO_SESSION_MARKERS:
                    continue
                if any(course in task for course in courses):
                    self.logger.debug(f"Slot {day_name} {slot} is a class, not a study session")
                    continue

                try:
                    start, end = parse_time_range(slot)
                    event = CalendarEvent(
                        title=task,
                        start_time=start,
                        end_time=end,
                        day=day,
                        color=Config.STUDY_COLORS[len(events) % len(Config.STUDY_COLORS)],
                        description="AI Study Session",
                        location="Study",
                        organizer="You",
                        attendees=[],
                    )
                except ValueError as e:
                    skip = SkippedEntry(source=f"{day_name} {slot}", message=str(e))
                    skipped.append(skip)
                    self.logger.warning(f"Skipping plan slot: {skip}")
                    continue

                events.append(event)

        self.logger.info(f"Parsed {len(events)} study sessions ({len(skipped)} skipped)")
        return events, skipped
