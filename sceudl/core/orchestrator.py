# File: sceudl/core/orchestrator.py
"""
Main orchestrator module for SCEUDL.
Wires the calendar grid to the PDF backend, the schedule generator and
Google Calendar for one editing session.
"""

import uuid
from typing import List, Optional, Sequence

from sceudl.core.config_manager import Config
from sceudl.core.event_store import EventStore
from sceudl.core.calendar_controller import CalendarController
from sceudl.core.view_composer import ViewComposer
from sceudl.utils.logger import setup_logger
from sceudl.auth.google_auth import get_calendar_service
from sceudl.services.calendar_service import GoogleCalendarService
from sceudl.services.pdf_service import PdfIngestionClient
from sceudl.processors.import_processor import ImportProcessor
from sceudl.llm.prompt_builder import PromptBuilder
from sceudl.llm.client import generate_study_schedule
from sceudl.models import CalendarEvent, NavigationState, SkippedEntry

logger = setup_logger(__name__)


class CalendarSession:
    """
    One calendar editing session.

    Holds the event store, navigation and gesture state, and runs the
    upload -> generate -> import pipeline. Failed network calls set
    `last_error` and leave the store untouched.
    """

    def __init__(
        self,
        store: Optional[EventStore] = None,
        navigation: Optional[NavigationState] = None,
        pdf_client: Optional[PdfIngestionClient] = None,
        calendar_service: Optional[GoogleCalendarService] = None,
        importer: Optional[ImportProcessor] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        session_id: Optional[str] = None
    ):
        logger.info("Initializing calendar session")

        self.store = store if store is not None else EventStore()
        self.navigation = navigation if navigation is not None else NavigationState()
        self.controller = CalendarController(self.store, Config.PIXELS_PER_HOUR, Config.SNAP_MINUTES)
        self.composer = ViewComposer(self.store, self.navigation, Config.PIXELS_PER_HOUR)

        self.pdf_client = pdf_client or PdfIngestionClient()
        self.calendar_service = calendar_service
        self.importer = importer or ImportProcessor()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.session_id = session_id or uuid.uuid4().hex

        self.class_times: List[str] = []
        self.source_name = ""
        self.skipped: List[SkippedEntry] = []
        self.last_error: Optional[str] = None

        logger.debug(f"Session {self.session_id} ready with {len(self.store)} events")

    def _fail(self, message: str) -> bool:
        self.last_error = message
        logger.error(message)
        return False

    def upload_pdf(self, pdf_bytes: bytes, filename: str) -> bool:
        """
        Send a class-schedule PDF to the backend and keep its class times.

        Returns:
            True if class times were extracted
        """
        self.last_error = None
        response = self.pdf_client.extract_class_times(pdf_bytes, filename)
        if not response.is_success():
            return self._fail(response.message or "Could not process the PDF")

        self.class_times = response.class_times
        self.source_name = filename
        logger.info(f"Loaded {len(self.class_times)} class times from {filename}")
        return True

    def generate_schedule(
        self,
        study_goals: str,
        intensity: int = Config.DEFAULT_INTENSITY,
        class_times: Optional[Sequence[str]] = None
    ) -> bool:
        """
        Generate study sessions and import them with the class schedule.

        Args:
            study_goals: Free-text goals
            intensity: 1 (light) .. 3 (heavy)
            class_times: Edited class-time lines; defaults to the uploaded ones

        Returns:
            True if events were imported
        """
        logger.info("=" * 60)
        logger.info("Generating study schedule")
        logger.info("=" * 60)

        self.last_error = None
        if class_times is not None:
            self.class_times = [line for line in class_times if line and line.strip()]

        if not study_goals or not study_goals.strip():
            return self._fail("Please enter your study goals")

        response = generate_study_schedule(
            self.class_times,
            study_goals,
            intensity,
            prompt_builder=self.prompt_builder
        )
        if not response.is_success():
            return self._fail(response.message or "Failed to generate schedule")

        class_events, class_skipped = self.importer.parse_class_times(self.class_times, self.source_name)
        study_events, study_skipped = self.importer.parse_study_plan(response.schedule, self.class_times)
        self.skipped = class_skipped + study_skipped

        self.store.bulk_import(class_events + study_events)
        logger.info(
            f"Imported {len(class_events)} classes and {len(study_events)} study sessions "
            f"({len(self.skipped)} entries skipped)"
        )
        return True

    def render(self):
        """Layout of the current view, including any drag preview."""
        return self.composer.compose(self.controller.state)

    def week_events(self) -> List[CalendarEvent]:
        return self.store.all()

    def _calendar(self) -> Optional[GoogleCalendarService]:
        if self.calendar_service is None:
            resource = get_calendar_service()
            if resource is None:
                return None
            self.calendar_service = GoogleCalendarService(resource)
        return self.calendar_service

    def sync_to_calendar(self, replace_previous: bool = True) -> int:
        """
        Push the active week to Google Calendar.

        Args:
            replace_previous: Delete what an earlier sync of this session pushed

        Returns:
            Number of events created
        """
        self.last_error = None
        calendar = self._calendar()
        if calendar is None:
            self._fail("Google Calendar is not connected")
            return 0

        week_start = self.navigation.week_start
        if replace_previous:
            calendar.delete_synced_events(self.session_id, week_start)

        events = self.week_events()
        created = calendar.sync_events(events, week_start, self.session_id)
        if created < len(events):
            self.last_error = f"Only {created} of {len(events)} events were synced"
            logger.warning(self.last_error)
        return created
