# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events, stores and mocks for all tests.
"""

import datetime
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add the project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sceudl.core.event_store import EventStore
from sceudl.models import (
    CalendarEvent, CalendarView, ContainerGeometry, EventColor,
    NavigationState, TimeOfDay
)


# ==================== Date Fixtures ====================

@pytest.fixture
def week_start():
    """A Sunday: 2025-03-02."""
    return datetime.date(2025, 3, 2)


@pytest.fixture
def navigation(week_start):
    """Week view with Monday 2025-03-03 selected."""
    return NavigationState(
        current_view=CalendarView.WEEK,
        selected_date=week_start + datetime.timedelta(days=1),
        week_start=week_start
    )


# ==================== Event Fixtures ====================

@pytest.fixture
def monday_lecture():
    """Monday 09:00-10:00 event."""
    return CalendarEvent(
        title="Lecture",
        start_time=TimeOfDay(9, 0),
        end_time=TimeOfDay(10, 0),
        day=2,
        color=EventColor.BLUE,
        location="Hayes Hall 117",
        organizer="University"
    )


@pytest.fixture
def wednesday_lab():
    """Wednesday 14:00-15:30 event."""
    return CalendarEvent(
        title="Lab",
        start_time=TimeOfDay(14, 0),
        end_time=TimeOfDay(15, 30),
        day=4,
        color=EventColor.GREEN
    )


@pytest.fixture
def store(monday_lecture, wednesday_lab):
    """Store holding the lecture (id 1) and the lab (id 2)."""
    return EventStore([monday_lecture, wednesday_lab])


@pytest.fixture
def create_event():
    """Factory fixture for creating test events."""
    def _create(
        title: str = "Test Event",
        start: str = "09:00",
        end: str = "10:00",
        day: int = 2,
        **kwargs
    ) -> CalendarEvent:
        return CalendarEvent(title=title, start_time=start, end_time=end, day=day, **kwargs)

    return _create


# ==================== Geometry Fixtures ====================

@pytest.fixture
def container_factory():
    """Day column whose top sits at client y=100 with no scroll."""
    def _create(day: int = 2, top: float = 100.0, scroll_top: float = 0.0) -> ContainerGeometry:
        return ContainerGeometry(day=day, top=top, scroll_top=scroll_top)

    return _create


@pytest.fixture
def monday_column(container_factory):
    return container_factory(day=2)


# ==================== Mock Service Fixtures ====================

@pytest.fixture
def mock_calendar_service():
    """Mock Google Calendar API resource with a batch that runs its callbacks."""
    mock = Mock()
    mock.events().list().execute.return_value = {'items': []}

    added = []

    def _new_batch():
        batch = Mock()
        batch.add.side_effect = lambda request, callback=None: added.append(callback)

        def _execute():
            for i, callback in enumerate(list(added)):
                callback(str(i), {'id': f'gc_{i}'}, None)
            added.clear()

        batch.execute.side_effect = _execute
        return batch

    mock.new_batch_http_request.side_effect = _new_batch
    return mock


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "external: mark test as requiring external services"
    )
