"""Wires the event service to its concrete stores."""

from django.conf import settings

from events.services.event_service import EventService
from events.stores.cloudinary_store import CloudinaryMediaStore
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(
        store=DjangoEventStore(),
        media=CloudinaryMediaStore.from_settings(),
        image_folder=settings.EVENT_IMAGE_FOLDER,
    )
