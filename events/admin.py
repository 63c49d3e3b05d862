from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "status", "date_start", "date_end", "created_at"]
    list_filter = ["status"]
    search_fields = ["title", "description"]
    # Image fields are owned by the event service's upload/delete sequence.
    readonly_fields = ["image_url", "image_id", "created_at", "updated_at"]
