"""App settings with defaults."""

from django.conf import settings
from django.utils import timezone

from upcoming_events.domain import DateRange

DEFAULT_RANGE_DAYS = 30


def range_days() -> int:
    return getattr(settings, "UPCOMING_EVENTS_RANGE_DAYS", DEFAULT_RANGE_DAYS)


def upcoming_range() -> DateRange:
    """Return the window of events shown in the list, starting now."""
    return DateRange.upcoming(range_days(), now=timezone.now())
