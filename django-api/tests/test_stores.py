"""Tests for EventStore implementations.

Run with: pytest tests/test_stores.py -v
"""

from dataclasses import replace
from unittest import mock

import pytest
from django.db import DatabaseError

from upcoming_events import models as orm
from upcoming_events.domain.errors import EventNotFoundError, StoreError
from upcoming_events.stores.django_store import DjangoEventStore
from upcoming_events.stores.interfaces import rejected, resolved
from upcoming_events.stores.memory_store import InMemoryEventStore


class TestFutureHelpers:
    """Tests for completed-future helpers."""

    def test_resolved_is_done(self):
        """resolved returns a completed future holding the value."""
        future = resolved(42)
        assert future.done()
        assert future.result() == 42

    def test_rejected_raises_on_result(self):
        """rejected returns a completed future raising the error."""
        future = rejected(StoreError("save", "boom"))
        assert future.done()
        with pytest.raises(StoreError):
            future.result()


class TestInMemoryEventStore:
    """Tests for the dictionary-backed store."""

    def test_range_is_sorted_by_date(self, date_range, event_factory):
        """Events come back ordered by date regardless of insertion order."""
        late = event_factory("Late", days_ahead=9)
        early = event_factory("Early", days_ahead=2)
        store = InMemoryEventStore([late, early])
        assert store.fetch_events_in_range(date_range).result() == [early, late]

    def test_same_date_ties_break_on_id(self, date_range, event_factory):
        """Events sharing a date come back in ID order."""
        second = event_factory("Second", event_id="bbbbbbbb-0000-4000-8000-000000000000")
        first = event_factory("First", event_id="aaaaaaaa-0000-4000-8000-000000000000")
        store = InMemoryEventStore([second, first])
        assert store.fetch_events_in_range(date_range).result() == [first, second]

    def test_fetch_missing_fails(self, event_factory):
        """Fetching an unknown ID fails with EventNotFoundError."""
        with pytest.raises(EventNotFoundError):
            InMemoryEventStore().fetch_by_id(event_factory("Ghost").id).result()

    def test_delete_missing_is_not_an_error(self, event_factory):
        """Deleting an unknown event completes normally."""
        assert InMemoryEventStore().delete(event_factory("Ghost")).result() is None


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for the Django ORM store."""

    def test_save_then_fetch_by_id(self, jazz):
        """A saved event can be read back by ID."""
        store = DjangoEventStore()
        store.save(jazz).result()
        assert store.fetch_by_id(jazz.id).result() == jazz

    def test_save_updates_existing_row(self, jazz):
        """Saving an event with a known ID updates it in place."""
        store = DjangoEventStore()
        store.save(jazz).result()
        store.save(replace(jazz, venue="Village Vanguard")).result()
        assert orm.Event.objects.count() == 1
        assert store.fetch_by_id(jazz.id).result().venue == "Village Vanguard"

    def test_range_filters_and_orders(self, date_range, jazz, rock, event_factory):
        """Only events inside the range are returned, earliest first."""
        store = DjangoEventStore()
        for event in (rock, event_factory("Far Away", days_ahead=90), jazz):
            store.save(event).result()
        assert store.fetch_events_in_range(date_range).result() == [jazz, rock]

    def test_same_date_ties_break_on_id(self, date_range, event_factory):
        """Rows sharing a date come back in ID order so indexes stay stable."""
        store = DjangoEventStore()
        second = event_factory("Second", event_id="bbbbbbbb-0000-4000-8000-000000000000")
        first = event_factory("First", event_id="aaaaaaaa-0000-4000-8000-000000000000")
        for event in (second, first):
            store.save(event).result()
        assert store.fetch_events_in_range(date_range).result() == [first, second]

    def test_delete_removes_row(self, jazz):
        """Deleting an event removes it from the table."""
        store = DjangoEventStore()
        store.save(jazz).result()
        store.delete(jazz).result()
        with pytest.raises(EventNotFoundError):
            store.fetch_by_id(jazz.id).result()

    def test_database_errors_become_store_errors(self, date_range):
        """Database failures surface as StoreError on the future."""
        store = DjangoEventStore()
        with mock.patch.object(orm.Event.objects, "filter", side_effect=DatabaseError("locked")):
            future = store.fetch_events_in_range(date_range)
        with pytest.raises(StoreError) as excinfo:
            future.result()
        assert excinfo.value.operation == "fetch_events_in_range"
        assert excinfo.value.reason == "locked"
