"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in upcoming_events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from upcoming_events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    venue: str
    city: str
    country: str
    date: datetime

    @property
    def location(self) -> str:
        return f"{self.venue} - {self.city} - {self.country}"
