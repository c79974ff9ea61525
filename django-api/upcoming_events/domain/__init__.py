from upcoming_events.domain.models import Event
from upcoming_events.domain.value_objects import DateRange, EventId

__all__ = [
    "Event",
    "EventId",
    "DateRange",
]
