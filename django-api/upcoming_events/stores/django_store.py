"""Django ORM implementation of the EventStore."""

import logging
from concurrent.futures import Future

from django.db import DatabaseError

from upcoming_events import models as orm
from upcoming_events.domain import DateRange, Event, EventId
from upcoming_events.domain.errors import EventNotFoundError, StoreError
from upcoming_events.stores.interfaces import EventStore, rejected, resolved

logger = logging.getLogger(__name__)


def _to_domain(record: orm.Event) -> Event:
    return Event(
        id=EventId(value=record.id),
        title=record.title,
        venue=record.venue,
        city=record.city,
        country=record.country,
        date=record.date,
    )


def _failure(operation: str, exc: DatabaseError) -> Future:
    logger.warning("Event store %s failed: %s", operation, exc)
    error = StoreError(operation, str(exc))
    error.__cause__ = exc
    return rejected(error)


class DjangoEventStore(EventStore):
    """SQL-backed event store using Django ORM."""

    def fetch_events_in_range(self, date_range: DateRange) -> "Future[list[Event]]":
        try:
            records = list(
                orm.Event.objects.filter(
                    date__range=(date_range.start, date_range.end)
                ).order_by("date", "id")
            )
        except DatabaseError as exc:
            return _failure("fetch_events_in_range", exc)
        return resolved([_to_domain(record) for record in records])

    def fetch_by_id(self, event_id: EventId) -> "Future[Event]":
        try:
            record = orm.Event.objects.filter(id=event_id.value).first()
        except DatabaseError as exc:
            return _failure("fetch_by_id", exc)
        if record is None:
            return rejected(EventNotFoundError(str(event_id)))
        return resolved(_to_domain(record))

    def delete(self, event: Event) -> "Future[None]":
        try:
            deleted, _ = orm.Event.objects.filter(id=event.id.value).delete()
        except DatabaseError as exc:
            return _failure("delete", exc)
        logger.debug("Deleted %d row(s) for event %s", deleted, event.id)
        return resolved(None)

    def save(self, event: Event) -> "Future[Event]":
        try:
            orm.Event.objects.update_or_create(
                id=event.id.value,
                defaults={
                    "title": event.title,
                    "venue": event.venue,
                    "city": event.city,
                    "country": event.country,
                    "date": event.date,
                },
            )
        except DatabaseError as exc:
            return _failure("save", exc)
        return resolved(event)
