from django.apps import AppConfig


class UpcomingEventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "upcoming_events"
    verbose_name = "Upcoming events"
