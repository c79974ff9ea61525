"""Load notifications.

A LoadNotifier carries two payload-free signals: a load has started, and a
load has finished (data may have changed). Each notifier owns its own Django
signals, so subscribers only hear the notifier they were handed.
"""

import logging
from collections.abc import Callable

from django.dispatch import Signal

logger = logging.getLogger(__name__)

Receiver = Callable[..., None]


class LoadNotifier:
    """Publish/subscribe channel for load start and finish."""

    def __init__(self) -> None:
        self.load_started = Signal()
        self.load_finished = Signal()

    def subscribe(self, on_started: Receiver, on_finished: Receiver) -> None:
        """Connect receivers. Receivers are held weakly; connecting twice is a no-op."""
        self.load_started.connect(on_started)
        self.load_finished.connect(on_finished)

    def unsubscribe(self, on_started: Receiver, on_finished: Receiver) -> None:
        self.load_started.disconnect(on_started)
        self.load_finished.disconnect(on_finished)

    def has_subscribers(self) -> bool:
        return self.load_started.has_listeners() or self.load_finished.has_listeners()

    def announce_started(self, sender: object = None) -> None:
        logger.debug("Load started (sender=%r)", sender)
        self.load_started.send(sender=sender)

    def announce_finished(self, sender: object = None) -> None:
        logger.debug("Load finished (sender=%r)", sender)
        self.load_finished.send(sender=sender)
