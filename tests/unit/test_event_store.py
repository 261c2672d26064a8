# File: tests/unit/test_event_store.py
"""
Unit tests for the event store.
"""

import pytest

from sceudl.core.event_store import EventStore
from sceudl.models import (
    DuplicateIdError, EventNotFoundError, InvalidRangeError, TimeOfDay
)


class TestAdd:
    """Tests for adding events."""

    def test_assigns_sequential_ids(self, store):
        """Test sequential id assignment."""
        assert [e.id for e in store.all()] == [1, 2]
        assert len(store) == 2
        assert 1 in store

    def test_keeps_explicit_id_and_continues_after_it(self, create_event):
        """Test that an explicit id is kept and the counter skips past it."""
        store = EventStore()
        store.add(create_event(id=10))
        added = store.add(create_event(title="Next"))
        assert added.id == 11

    def test_duplicate_id_raises_error(self, store, create_event):
        """Test that a duplicate id raises DuplicateIdError."""
        with pytest.raises(DuplicateIdError):
            store.add(create_event(id=1))
        assert len(store) == 2

    def test_does_not_mutate_input(self, create_event):
        """Test that add does not mutate the caller's event."""
        event = create_event()
        EventStore().add(event)
        assert event.id is None


class TestUpdate:
    """Tests for partial updates."""

    def test_patch_replaces_fields_in_place(self, store):
        """Test that a patch replaces fields in place."""
        updated = store.update(1, day=3, start_time="11:15", end_time="12:15")

        assert updated.day == 3
        assert updated.start_time == TimeOfDay(11, 15)
        assert store.get(1) == updated
        assert [e.id for e in store.all()] == [1, 2]

    def test_untouched_fields_survive(self, store):
        """Test that unpatched fields survive an update."""
        updated = store.update(1, title="Renamed")
        assert updated.location == "Hayes Hall 117"
        assert updated.start_time == TimeOfDay(9, 0)

    def test_invalid_range_leaves_event_unchanged(self, store):
        """Test that an invalid range leaves the event unchanged."""
        before = store.get(1)
        with pytest.raises(InvalidRangeError):
            store.update(1, end_time=TimeOfDay(8, 30))
        assert store.get(1) == before

    def test_zero_length_is_invalid(self, store):
        """Test that a zero-length patch is invalid."""
        with pytest.raises(InvalidRangeError):
            store.update(1, start_time="10:00")

    def test_unknown_id_raises_error(self, store):
        """Test updating an unknown id."""
        with pytest.raises(EventNotFoundError):
            store.update(99, title="Nope")

    def test_id_is_not_patchable(self, store):
        """Test that the id cannot be patched."""
        with pytest.raises(ValueError, match="id"):
            store.update(1, id=5)

    def test_unknown_field_raises_error(self, store):
        """Test that an unknown field raises an error."""
        with pytest.raises(ValueError, match="colour"):
            store.update(1, colour="red")


class TestQueries:
    """Tests for lookups and removal."""

    def test_get_by_day_preserves_insertion_order(self, store, create_event):
        """Test that get_by_day preserves insertion order."""
        store.add(create_event(title="Early", start="07:00", end="08:00", day=2))
        titles = [e.title for e in store.get_by_day(2)]
        assert titles == ["Lecture", "Early"]
        assert store.get_by_day(5) == []

    def test_remove(self, store):
        """Test event removal."""
        removed = store.remove(1)
        assert removed.title == "Lecture"
        assert 1 not in store
        with pytest.raises(EventNotFoundError):
            store.remove(1)

    def test_get_missing_raises_key_error(self, store):
        """Test that get on a missing id raises KeyError."""
        with pytest.raises(KeyError):
            store.get(42)


class TestBulkImport:
    """Tests for importing parsed batches."""

    def test_ids_never_collide(self, store, create_event):
        """Test that ids never collide after removals."""
        store.remove(2)
        stored = store.bulk_import([create_event(id=1), create_event(title="B")])

        ids = [e.id for e in store.all()]
        assert len(ids) == len(set(ids))
        assert [e.id for e in stored] == [3, 4]

    def test_clear_keeps_counter(self, store, create_event):
        """Test that clear keeps the id counter."""
        store.clear()
        assert len(store) == 0
        assert store.add(create_event()).id == 3
