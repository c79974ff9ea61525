"""Event list presenter - list, search and refresh state for an event table.

The presenter:
- Owns the authoritative list (the last fetch for the date range)
- Derives the filtered list from the current search term
- Tracks the loading indicator from load notifications
- Depends only on interfaces (store, notifier, navigator, renderer)

Store calls return futures. The presenter applies their results when they
complete, records StoreError in ``error`` and hands the outcome back to the
caller as a future of its own.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Future
from enum import Enum
from typing import Any, Protocol, TypeVar

from upcoming_events.conf import upcoming_range
from upcoming_events.domain import DateRange, Event
from upcoming_events.domain.errors import InvalidIndexError, StoreError
from upcoming_events.domain.filtering import filter_events
from upcoming_events.notifications import LoadNotifier
from upcoming_events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

TITLE_FORMAT = "Upcoming events ({count})"


class DisplayState(Enum):
    """Busy indicator state."""

    IDLE = "idle"
    LOADING = "loading"


class SearchMode(Enum):
    """Whether a search session is open."""

    INACTIVE = "inactive"
    ACTIVE = "active"


class NavigationMode(Enum):
    """How the detail surface opens an event."""

    VIEW = "view"
    EDIT = "edit"


class Navigator(Protocol):
    """Presents the detail surface for an event, or an empty one to add an event."""

    def present(self, event: Event | None, mode: NavigationMode) -> None: ...


class RowRenderer(Protocol):
    """Draws rows from row_count()/row_at() and reacts to list changes."""

    def reload(self) -> None: ...

    def remove_row(self, index: int) -> None: ...

    def display_state_changed(self, state: DisplayState) -> None: ...


class EventListPresenter:
    """Presenter for the upcoming events table."""

    def __init__(
        self,
        store: EventStore,
        notifier: LoadNotifier,
        navigator: Navigator,
        renderer: RowRenderer | None = None,
        date_range: DateRange | None = None,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._navigator = navigator
        self._renderer = renderer
        self._date_range = date_range
        self._events: list[Event] = []
        self._filtered: list[Event] = []
        self._search_term = ""
        self.search_mode = SearchMode.INACTIVE
        self.display_state = DisplayState.IDLE
        self.error: StoreError | None = None

    @property
    def title(self) -> str:
        return TITLE_FORMAT.format(count=len(self._events))

    @property
    def events(self) -> list[Event]:
        """The authoritative list."""
        return list(self._events)

    @property
    def filtered_events(self) -> list[Event]:
        return list(self._filtered)

    @property
    def search_term(self) -> str:
        return self._search_term

    # Lifecycle

    def attach(self) -> None:
        """Subscribe to load notifications. Safe to call repeatedly."""
        self._notifier.subscribe(self._handle_load_started, self._handle_load_finished)

    def detach(self) -> None:
        self._notifier.unsubscribe(self._handle_load_started, self._handle_load_finished)

    def on_become_visible(self) -> "Future[list[Event]]":
        self.attach()
        return self.reload()

    def reload(self) -> "Future[list[Event]]":
        """Replace the authoritative list with the store's events for the range."""
        date_range = self._date_range or upcoming_range()
        return self._settle(
            self._store.fetch_events_in_range(date_range), self._replace_events
        )

    # Search

    def begin_search(self) -> None:
        self.search_mode = SearchMode.ACTIVE

    def end_search(self) -> None:
        self.search_mode = SearchMode.INACTIVE
        self._search_term = ""
        self._filtered = []
        self._reload_rows()

    def on_search_text_changed(self, term: str) -> None:
        self.search_mode = SearchMode.ACTIVE
        self._search_term = term
        self._filtered = filter_events(self._events, term)
        self._reload_rows()

    # Rows

    def row_count(self) -> int:
        return len(self._effective_list())

    def row_at(self, index: int) -> Event:
        rows = self._effective_list()
        if not 0 <= index < len(rows):
            raise InvalidIndexError(index, len(rows))
        return rows[index]

    def rows(self) -> list[Event]:
        return list(self._effective_list())

    def delete_row(self, index: int) -> "Future[None]":
        """Delete the event shown at ``index``.

        The row is removed locally straight away. A store failure is reported
        through ``error`` and the returned future; the row is not restored.
        """
        event = self.row_at(index)
        deletion = self._store.delete(event)
        self._events = [e for e in self._events if e.id != event.id]
        self._filtered = [e for e in self._filtered if e.id != event.id]
        if self._renderer is not None:
            self._renderer.remove_row(index)
        logger.info("Deleted event %s, %d remaining", event.id, len(self._events))
        return self._settle(deletion, lambda _: None)

    def select_row(
        self, index: int, mode: NavigationMode = NavigationMode.VIEW
    ) -> "Future[Event]":
        """Open the event shown at ``index``, re-read from the store by ID."""
        event = self.row_at(index)
        if self.search_mode is SearchMode.ACTIVE:
            self.end_search()
        return self._settle(
            self._store.fetch_by_id(event.id),
            lambda found: self._present(found, mode),
        )

    def compose_event(self) -> None:
        self._navigator.present(None, NavigationMode.EDIT)

    # Load notifications

    def on_load_start(self) -> None:
        self._set_display_state(DisplayState.LOADING)

    def on_load_finish(self) -> "Future[list[Event]]":
        self._set_display_state(DisplayState.IDLE)
        return self.reload()

    def _handle_load_started(self, sender: Any = None, **kwargs: Any) -> None:
        self.on_load_start()

    def _handle_load_finished(self, sender: Any = None, **kwargs: Any) -> None:
        self.on_load_finish()

    # Internals

    def _effective_list(self) -> list[Event]:
        if self.search_mode is SearchMode.ACTIVE and self._search_term:
            return self._filtered
        return self._events

    def _replace_events(self, events: list[Event]) -> list[Event]:
        self._events = list(events)
        if self._search_term:
            self._filtered = filter_events(self._events, self._search_term)
        logger.debug("Loaded %d events", len(self._events))
        self._reload_rows()
        return list(self._events)

    def _present(self, event: Event, mode: NavigationMode) -> Event:
        self._navigator.present(event, mode)
        return event

    def _set_display_state(self, state: DisplayState) -> None:
        self.display_state = state
        if self._renderer is not None:
            self._renderer.display_state_changed(state)

    def _reload_rows(self) -> None:
        if self._renderer is not None:
            self._renderer.reload()

    def _settle(self, source: "Future[T]", on_success: Callable[[T], R]) -> "Future[R]":
        outcome: Future[R] = Future()

        def complete(done: "Future[T]") -> None:
            try:
                value = on_success(done.result())
            except StoreError as exc:
                self.error = exc
                logger.warning("%s (%s)", exc, exc.reason)
                outcome.set_exception(exc)
            except Exception as exc:
                outcome.set_exception(exc)
            else:
                self.error = None
                outcome.set_result(value)

        source.add_done_callback(complete)
        return outcome
