"""Free-text filtering of event lists.

A term matches an event when it occurs, ignoring case, in the title, the
venue or the city. Dates are not searched.
"""

from collections.abc import Iterable

from upcoming_events.domain.models import Event


def matches(event: Event, term: str) -> bool:
    needle = term.lower()
    return (
        needle in event.title.lower()
        or needle in event.venue.lower()
        or needle in event.city.lower()
    )


def filter_events(events: Iterable[Event], term: str) -> list[Event]:
    """Return the events matching ``term`` in their original order.

    An empty term matches nothing; callers show the unfiltered list instead.
    """
    if not term:
        return []
    return [event for event in events if matches(event, term)]
