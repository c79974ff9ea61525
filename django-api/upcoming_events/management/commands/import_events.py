"""Import events from a JSON file into the event store.

The file holds a list of objects with ``title``, ``venue``, ``city``,
``country`` and ISO-8601 ``date`` fields, plus an optional ``id`` so that
re-importing a file updates events instead of duplicating them. The import
is all or nothing: a failed write rolls back every event of the file.
"""

import json
import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from upcoming_events.domain.errors import StoreError
from upcoming_events.handlers.serializers import EventInputSerializer
from upcoming_events.notifications import LoadNotifier
from upcoming_events.services.event_sync import EventSyncService
from upcoming_events.stores.django_store import DjangoEventStore

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Import events from a JSON file"

    def add_arguments(self, parser):
        parser.add_argument("path", type=Path, help="JSON file with a list of events")

    def handle(self, *args, path: Path, **options):
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CommandError(f"Cannot read {path}: {exc}") from exc
        if not isinstance(records, list):
            raise CommandError(f"{path} must contain a JSON list of events")

        serializers = [EventInputSerializer(data=record) for record in records]
        invalid = {
            position: serializer.errors
            for position, serializer in enumerate(serializers)
            if not serializer.is_valid()
        }
        if invalid:
            raise CommandError(f"Invalid events in {path}: {invalid}")

        events = [serializer.to_event() for serializer in serializers]
        service = EventSyncService(DjangoEventStore(), LoadNotifier())
        try:
            with transaction.atomic():
                saved = service.import_events(events)
        except StoreError as exc:
            raise CommandError(str(exc)) from exc

        logger.info("Imported %d events from %s", len(saved), path)
        self.stdout.write(self.style.SUCCESS(f"Imported {len(saved)} events"))
