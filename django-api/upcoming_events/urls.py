from django.urls import path

from upcoming_events.handlers import EventDetailView, EventListView, EventRowView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/rows/<int:index>", EventRowView.as_view(), name="event-row"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
