"""Serializers for transforming domain models to API responses and back."""

from django.utils import timezone
from rest_framework import serializers

from upcoming_events.domain import Event, EventId

ROW_DATE_FORMAT = "%d-%m\n%Y"


class EventRowSerializer(serializers.Serializer):
    """One row of the event table."""

    id = serializers.SerializerMethodField()
    title = serializers.CharField()
    date_label = serializers.SerializerMethodField()
    location = serializers.CharField()

    def get_id(self, event: Event) -> str:
        return str(event.id)

    def get_date_label(self, event: Event) -> str:
        return timezone.localtime(event.date).strftime(ROW_DATE_FORMAT)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    title = serializers.CharField()
    venue = serializers.CharField()
    city = serializers.CharField()
    country = serializers.CharField()
    date = serializers.DateTimeField()

    def get_id(self, event: Event) -> str:
        return str(event.id)


class EventInputSerializer(serializers.Serializer):
    """Validates event fields submitted by clients and import files."""

    id = serializers.UUIDField(required=False)
    title = serializers.CharField(max_length=255)
    venue = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=255)
    country = serializers.CharField(max_length=255)
    date = serializers.DateTimeField()

    def to_event(self, event_id: EventId | None = None) -> Event:
        """Build a domain event from validated data.

        An explicit ``event_id`` wins over a submitted ``id``; with neither a
        fresh ID is generated.
        """
        data = dict(self.validated_data)
        submitted = data.pop("id", None)
        if event_id is None:
            event_id = EventId(value=submitted) if submitted else EventId.new()
        return Event(id=event_id, **data)
