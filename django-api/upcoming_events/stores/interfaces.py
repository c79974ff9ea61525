"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every operation returns a
Future so that callers compose with stores that complete later; the stores in
this package complete their futures before returning them.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import TypeVar

from upcoming_events.domain import DateRange, Event, EventId

T = TypeVar("T")


def resolved(value: T) -> "Future[T]":
    """Return a future already completed with ``value``."""
    future: Future[T] = Future()
    future.set_result(value)
    return future


def rejected(exc: BaseException) -> Future:
    """Return a future already failed with ``exc``."""
    future: Future = Future()
    future.set_exception(exc)
    return future


class EventStore(ABC):
    """Interface for event persistence operations.

    Failures are reported as StoreError on the returned future, never raised
    from the call itself.
    """

    @abstractmethod
    def fetch_events_in_range(self, date_range: DateRange) -> "Future[list[Event]]":
        """Return events dated within the range, ordered by date ascending."""
        ...

    @abstractmethod
    def fetch_by_id(self, event_id: EventId) -> "Future[Event]":
        """Return an event by ID; fails with EventNotFoundError if missing."""
        ...

    @abstractmethod
    def delete(self, event: Event) -> "Future[None]":
        """Remove an event. Deleting a missing event is not an error."""
        ...

    @abstractmethod
    def save(self, event: Event) -> "Future[Event]":
        """Insert the event, or update the stored event with the same ID."""
        ...
