# File: sceudl/models/api.py
"""
Data models for SCEUDL service responses.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Weekday name -> "<start> - <end>" -> task label
StudyPlan = Dict[str, Dict[str, str]]

@dataclass
class ScheduleResponse:
    """Response from the schedule generator."""
    status: str  # "success" or "fail"
    schedule: Optional[StudyPlan] = None
    message: Optional[str] = None
    raw_response: Optional[dict] = None

    def is_success(self) -> bool:
        """Check if response was successful."""
        return self.status == "success" and self.schedule is not None


@dataclass
class PdfIngestionResponse:
    """Response from the PDF ingestion backend."""
    status: str
    class_times: List[str] = field(default_factory=list)
    message: Optional[str] = None

    def is_success(self) -> bool:
        return self.status == "success"


@dataclass
class SkippedEntry:
    """An import line or plan entry that could not be converted."""
    source: str
    message: str
    entry_index: Optional[int] = None

    def __str__(self) -> str:
        """String representation of the skip."""
        if self.entry_index is not None:
            return f"Entry {self.entry_index} - {self.source!r}: {self.message}"
        return f"{self.source!r}: {self.message}"
