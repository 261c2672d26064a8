# File: sceudl/services/calendar_service.py

import datetime
from typing import Iterable, List

import pytz
from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from sceudl.core.config_manager import Config
from sceudl.utils.logger import setup_logger
from sceudl.models import CalendarEvent, TimeOfDay

logger = setup_logger(__name__)


class GoogleCalendarService:
    """Pushes the session's events to Google Calendar."""

    def __init__(self, calendar_service: Resource, calendar_id: str = Config.CALENDAR_ID):
        """
        Initialize calendar service.

        Args:
            calendar_service: Authenticated Google Calendar API resource
            calendar_id: Target calendar
        """
        self.service = calendar_service
        self.calendar_id = calendar_id
        self.generator_id = Config.GENERATOR_ID
        self.timezone = pytz.timezone(Config.TARGET_TIMEZONE)

    def _localize(self, week_start: datetime.date, day: int, time: TimeOfDay) -> datetime.datetime:
        """Wall-clock time of a day index in the target timezone."""
        date = week_start + datetime.timedelta(days=day - 1)
        return self.timezone.localize(
            datetime.datetime.combine(date, datetime.time(time.hour, time.minute))
        )

    @staticmethod
    def _description(event: CalendarEvent) -> str:
        lines = [event.description] if event.description else []
        if event.organizer:
            lines.append(f"Organizer: {event.organizer}")
        if event.attendees:
            lines.append(f"Attendees: {', '.join(event.attendees)}")
        return "\n".join(lines)

    def to_google_event(
        self,
        event: CalendarEvent,
        week_start: datetime.date,
        session_id: str
    ) -> dict:
        """
        Build the Calendar API body for one event.

        Args:
            event: Event to push
            week_start: Sunday of the active week; day index 1 maps to it
            session_id: Tag used to find this push again for cleanup

        Returns:
            Event resource dict
        """
        start_dt = self._localize(week_start, event.day, event.start_time)
        end_dt = self._localize(week_start, event.day, event.end_time)

        body = {
            'summary': event.title,
            'description': self._description(event),
            'start': {
                'dateTime': start_dt.isoformat(),
                'timeZone': Config.TARGET_TIMEZONE,
            },
            'end': {
                'dateTime': end_dt.isoformat(),
                'timeZone': Config.TARGET_TIMEZONE,
            },
            'colorId': Config.COLOR_IDS.get(event.color.value, Config.DEFAULT_COLOR_ID),
            'extendedProperties': {
                'private': {
                    'sourceId': self.generator_id,
                    'sessionId': session_id,
                    'weekStart': week_start.isoformat(),
                }
            },
        }
        if event.location:
            body['location'] = event.location
        return body

    def sync_events(
        self,
        events: Iterable[CalendarEvent],
        week_start: datetime.date,
        session_id: str
    ) -> int:
        """
        Create calendar events for the active week in one batch.

        Returns:
            Number of events created
        """
        events = list(events)
        logger.info(f"Syncing {len(events)} events for week of {week_start}")

        if not events:
            return 0

        batch = self.service.new_batch_http_request()
        created_count = 0

        def callback(request_id, response, exception):
            nonlocal created_count
            if exception is None:
                created_count += 1
            else:
                logger.error(f"Failed to create event {request_id}: {exception}")

        for event in events:
            batch.add(
                self.service.events().insert(
                    calendarId=self.calendar_id,
                    body=self.to_google_event(event, week_start, session_id)
                ),
                callback=callback
            )

        try:
            batch.execute()
        except HttpError as e:
            logger.error(f"Batch execution failed: {e}", exc_info=True)

        logger.info(f"Successfully created {created_count} events")
        return created_count

    def _find_synced_events(self, session_id: str, week_start: datetime.date) -> List[dict]:
        start = self.timezone.localize(datetime.datetime.combine(week_start, datetime.time.min))
        end = start + datetime.timedelta(days=7)

        events_result = self.service.events().list(
            calendarId=self.calendar_id,
            timeMin=start.isoformat(),
            timeMax=end.isoformat(),
            singleEvents=True,
            privateExtendedProperty=[
                f'sourceId={self.generator_id}',
                f'sessionId={session_id}',
            ]
        ).execute()
        return events_result.get('items', [])

    def delete_synced_events(self, session_id: str, week_start: datetime.date) -> int:
        """
        Delete events a previous sync of this session created in the week.

        Returns:
            Number of events deleted
        """
        logger.info(f"Deleting synced events of session {session_id} for week of {week_start}")

        try:
            events_to_delete = self._find_synced_events(session_id, week_start)
        except HttpError as e:
            logger.error(f"Error listing synced events: {e}", exc_info=True)
            return 0

        if not events_to_delete:
            logger.info("No previously synced events found")
            return 0

        batch = self.service.new_batch_http_request()
        deleted_count = 0

        def callback(request_id, response, exception):
            nonlocal deleted_count
            if exception is None:
                deleted_count += 1
            else:
                logger.warning(f"Failed to delete event {request_id}: {exception}")

        for event in events_to_delete:
            batch.add(
                self.service.events().delete(
                    calendarId=self.calendar_id,
                    eventId=event['id']
                ),
                callback=callback
            )

        try:
            batch.execute()
        except HttpError as e:
            logger.error(f"Batch delete failed: {e}", exc_info=True)

        logger.info(f"Successfully deleted {deleted_count} events")
        return deleted_count
