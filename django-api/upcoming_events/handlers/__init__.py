from upcoming_events.handlers.views import EventDetailView, EventListView, EventRowView

__all__ = [
    "EventListView",
    "EventRowView",
    "EventDetailView",
]
