"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Drive a request-scoped presenter or service for the behaviour
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from upcoming_events.domain import Event, EventId
from upcoming_events.domain.errors import DomainError, ErrorCode, InvalidEventIdError
from upcoming_events.handlers.serializers import (
    EventInputSerializer,
    EventRowSerializer,
    EventSerializer,
)
from upcoming_events.notifications import LoadNotifier
from upcoming_events.services.event_list import EventListPresenter, NavigationMode
from upcoming_events.services.event_sync import EventSyncService
from upcoming_events.stores.django_store import DjangoEventStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_INDEX: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class SelectedEvent:
    """Navigator that remembers what was presented so the view can return it."""

    def __init__(self) -> None:
        self.event: Event | None = None
        self.mode: NavigationMode | None = None

    def present(self, event: Event | None, mode: NavigationMode) -> None:
        self.event = event
        self.mode = mode


def _parse_event_id(value: str) -> EventId:
    try:
        return EventId.from_string(value)
    except ValueError:
        raise InvalidEventIdError() from None


def _open_list(request: Request, navigator: SelectedEvent | None = None) -> EventListPresenter:
    presenter = EventListPresenter(
        store=DjangoEventStore(),
        notifier=LoadNotifier(),
        navigator=navigator or SelectedEvent(),
    )
    presenter.on_become_visible().result()
    term = request.query_params.get("q", "")
    if term:
        presenter.on_search_text_changed(term)
    return presenter


def _sync_service() -> EventSyncService:
    return EventSyncService(DjangoEventStore(), LoadNotifier())


class DomainErrorMixin:
    """Turns domain errors into {"code", "message"} responses."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            logger.info("Request failed with %s", exc.code.value)
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=ERROR_STATUS[exc.code],
            )
        return super().handle_exception(exc)


class EventListView(DomainErrorMixin, APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        presenter = _open_list(request)
        return Response(
            {
                "title": presenter.title,
                "search": presenter.search_term,
                "count": presenter.row_count(),
                "rows": EventRowSerializer(presenter.rows(), many=True).data,
            }
        )

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = _sync_service().save_event(serializer.to_event(EventId.new()))
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventRowView(DomainErrorMixin, APIView):
    """Handler for GET/DELETE /api/events/rows/{index}

    The index addresses the list as displayed, filtered when ``q`` is given.
    """

    def get(self, request: Request, index: int) -> Response:
        navigator = SelectedEvent()
        presenter = _open_list(request, navigator)
        event = presenter.select_row(index).result()
        return Response({"mode": navigator.mode.value, **EventSerializer(event).data})

    def delete(self, request: Request, index: int) -> Response:
        presenter = _open_list(request)
        presenter.delete_row(index).result()
        return Response({"title": presenter.title, "count": presenter.row_count()})


class EventDetailView(DomainErrorMixin, APIView):
    """Handler for GET/PUT /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = DjangoEventStore().fetch_by_id(_parse_event_id(event_id)).result()
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        existing = DjangoEventStore().fetch_by_id(_parse_event_id(event_id)).result()
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = _sync_service().save_event(serializer.to_event(existing.id))
        return Response(EventSerializer(event).data)
