"""Dictionary-backed EventStore for tests and local tooling."""

import logging
from collections.abc import Iterable
from concurrent.futures import Future

from upcoming_events.domain import DateRange, Event, EventId
from upcoming_events.domain.errors import EventNotFoundError
from upcoming_events.stores.interfaces import EventStore, rejected, resolved

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """Event store keeping domain events in memory, keyed by ID."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: dict[EventId, Event] = {event.id: event for event in events}

    def __len__(self) -> int:
        return len(self._events)

    def fetch_events_in_range(self, date_range: DateRange) -> "Future[list[Event]]":
        found = [event for event in self._events.values() if date_range.contains(event.date)]
        found.sort(key=lambda event: (event.date, str(event.id)))
        return resolved(found)

    def fetch_by_id(self, event_id: EventId) -> "Future[Event]":
        event = self._events.get(event_id)
        if event is None:
            return rejected(EventNotFoundError(str(event_id)))
        return resolved(event)

    def delete(self, event: Event) -> "Future[None]":
        if self._events.pop(event.id, None) is None:
            logger.debug("Delete of unknown event %s ignored", event.id)
        return resolved(None)

    def save(self, event: Event) -> "Future[Event]":
        self._events[event.id] = event
        return resolved(event)
