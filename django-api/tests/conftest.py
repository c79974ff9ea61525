"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest
from rest_framework.test import APIClient

from upcoming_events.domain import DateRange, Event, EventId
from upcoming_events.domain.errors import StoreError
from upcoming_events.notifications import LoadNotifier
from upcoming_events.services.event_list import EventListPresenter
from upcoming_events.stores.interfaces import rejected
from upcoming_events.stores.memory_store import InMemoryEventStore

NOW = datetime(2030, 6, 1, 18, 0, tzinfo=timezone.utc)


def make_event(
    title: str,
    venue: str = "Somewhere",
    city: str = "Nowhere",
    country: str = "NL",
    days_ahead: int = 1,
    event_id: str | None = None,
) -> Event:
    return Event(
        id=EventId(value=UUID(event_id)) if event_id else EventId.new(),
        title=title,
        venue=venue,
        city=city,
        country=country,
        date=NOW + timedelta(days=days_ahead),
    )


class RecordingNavigator:
    def __init__(self) -> None:
        self.presented: list[tuple] = []

    def present(self, event, mode) -> None:
        self.presented.append((event, mode))


class RecordingRenderer:
    def __init__(self) -> None:
        self.reloads = 0
        self.removed: list[int] = []
        self.states: list = []

    def reload(self) -> None:
        self.reloads += 1

    def remove_row(self, index: int) -> None:
        self.removed.append(index)

    def display_state_changed(self, state) -> None:
        self.states.append(state)


class FailingStore(InMemoryEventStore):
    """In-memory store whose operations fail once ``broken`` is set."""

    def __init__(self, events=()) -> None:
        super().__init__(events)
        self.broken = False

    def fetch_events_in_range(self, date_range):
        if self.broken:
            return rejected(StoreError("fetch_events_in_range", "disk unavailable"))
        return super().fetch_events_in_range(date_range)

    def fetch_by_id(self, event_id):
        if self.broken:
            return rejected(StoreError("fetch_by_id", "disk unavailable"))
        return super().fetch_by_id(event_id)

    def delete(self, event):
        if self.broken:
            return rejected(StoreError("delete", "disk unavailable"))
        return super().delete(event)

    def save(self, event):
        if self.broken:
            return rejected(StoreError("save", "disk unavailable"))
        return super().save(event)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def date_range() -> DateRange:
    return DateRange.upcoming(30, now=NOW)


@pytest.fixture
def jazz() -> Event:
    return make_event("Jazz Night", venue="Blue Note", city="NYC", country="US", days_ahead=1)


@pytest.fixture
def rock() -> Event:
    return make_event("Rock Fest", venue="Arena", city="LA", country="US", days_ahead=2)


@pytest.fixture
def store(jazz: Event, rock: Event) -> FailingStore:
    return FailingStore([jazz, rock])


@pytest.fixture
def notifier() -> LoadNotifier:
    return LoadNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def presenter(store, notifier, navigator, renderer, date_range) -> Iterator[EventListPresenter]:
    presenter = EventListPresenter(
        store=store,
        notifier=notifier,
        navigator=navigator,
        renderer=renderer,
        date_range=date_range,
    )
    yield presenter
    presenter.detach()


@pytest.fixture
def event_factory():
    return make_event
