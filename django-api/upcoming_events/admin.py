from django.contrib import admin

from upcoming_events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "venue", "city", "country", "date"]
    list_filter = ["country"]
    search_fields = ["title", "venue", "city"]
    date_hierarchy = "date"
