"""Event sync service - writes events and announces the load around them.

Services:
- Depend only on interfaces (stores, notifier)
- Announce load start before writing and load finish afterwards, even when
  the write fails, so busy indicators always clear
- Propagate StoreError to the caller
"""

import logging
from collections.abc import Iterable

from upcoming_events.domain.models import Event
from upcoming_events.notifications import LoadNotifier
from upcoming_events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventSyncService:
    """Service for writing events into the store."""

    def __init__(self, store: EventStore, notifier: LoadNotifier) -> None:
        self._store = store
        self._notifier = notifier

    def save_event(self, event: Event) -> Event:
        """Insert or update a single event.

        Raises:
            StoreError: If the store fails to write the event.
        """
        return self.import_events([event])[0]

    def import_events(self, events: Iterable[Event]) -> list[Event]:
        """Write each event in order.

        Raises:
            StoreError: On the first event the store fails to write.
        """
        self._notifier.announce_started(sender=self)
        try:
            saved = [self._store.save(event).result() for event in events]
        finally:
            self._notifier.announce_finished(sender=self)
        logger.info("Saved %d event(s)", len(saved))
        return saved
