# File: sceudl/core/config_manager.py
"""
Centralized configuration management for SCEUDL.
Loads settings from environment variables and holds the grid constants.
"""

import os
from pathlib import Path
from typing import Dict, List
from dotenv import load_dotenv

from sceudl.models.enums import EventColor

# Load environment variables
load_dotenv()

class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from sceudl/core/

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    # Files
    TOKEN_FILE = BASE_DIR / "token.json"
    CREDENTIALS_FILE = BASE_DIR / "credentials.json"

    # API Keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # LLM Settings
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-exp")
    GEMINI_API_URL = os.getenv(
        "GEMINI_API_URL",
        "https://generativelanguage.googleapis.com/v1beta/models"
    )
    REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "60"))

    # PDF ingestion backend
    PDF_SERVICE_URL = os.getenv("PDF_SERVICE_URL", "http://localhost:3001")

    # Google Services
    GOOGLE_SCOPES = [
        'https://www.googleapis.com/auth/calendar',
    ]
    CALENDAR_ID = os.getenv("CALENDAR_ID", "primary")
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
    GENERATOR_ID = "SCEUDL_Study_Planner_v1"

    # Grid geometry
    PIXELS_PER_HOUR = 80
    SNAP_MINUTES = 15
    DEFAULT_EVENT_MINUTES = 60
    MONTH_CELL_EVENT_LIMIT = 3

    # Day indices follow the week view columns: SUN=1 .. SAT=7
    WEEKDAY_LABELS: List[str] = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]
    DAY_ABBREVIATIONS: Dict[str, int] = {
        "Sun": 1, "Mon": 2, "Tue": 3, "Wed": 4, "Thu": 5, "Fri": 6, "Sat": 7
    }
    DAY_NAMES: Dict[str, int] = {
        "Sunday": 1,
        "Monday": 2,
        "Tuesday": 3,
        "Wednesday": 4,
        "Thursday": 5,
        "Friday": 6,
        "Saturday": 7
    }

    # Slots offered to the schedule generator
    STUDY_DAYS: List[str] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    STUDY_TIME_SLOTS: List[str] = [
        "07:30 - 08:30",
        "08:30 - 09:30",
        "09:30 - 10:30",
        "10:30 - 11:30",
        "11:30 - 12:30",
        "12:30 - 13:30",
        "13:30 - 14:30",
        "14:30 - 15:30",
        "15:30 - 16:30",
    ]
    INTENSITY_LABELS: Dict[int, str] = {1: "Light", 2: "Moderate", 3: "Heavy"}
    DEFAULT_INTENSITY = 2

    # Palettes
    CLASS_COLORS: List[EventColor] = [EventColor.BLUE, EventColor.INDIGO, EventColor.PURPLE]
    STUDY_COLORS: List[EventColor] = [
        EventColor.CYAN, EventColor.BLUE, EventColor.GREEN, EventColor.PURPLE,
        EventColor.ORANGE, EventColor.PINK, EventColor.INDIGO, EventColor.TEAL
    ]

    # Palette tag -> Google Calendar colorId
    COLOR_IDS: Dict[str, str] = {
        EventColor.INDIGO.value: '1',   # Lavender
        EventColor.TEAL.value: '2',     # Sage
        EventColor.PURPLE.value: '3',   # Grape
        EventColor.PINK.value: '4',     # Flamingo
        EventColor.YELLOW.value: '5',   # Banana
        EventColor.ORANGE.value: '6',   # Tangerine
        EventColor.CYAN.value: '7',     # Peacock
        EventColor.BLUE.value: '9',     # Blueberry
        EventColor.GREEN.value: '10',   # Basil
        EventColor.RED.value: '11',     # Tomato
    }
    DEFAULT_COLOR_ID = '7'

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = []

        if not cls.GEMINI_API_KEY:
            errors.append("GEMINI_API_KEY not set")

        if not cls.CREDENTIALS_FILE.exists():
            errors.append(f"credentials.json not found at {cls.CREDENTIALS_FILE}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
