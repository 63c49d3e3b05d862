"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Collaborator failures are never retried or swallowed. They propagate and
abort the remaining steps of the operation.
"""

import logging
from dataclasses import replace
from typing import IO

from events.domain import MERGEABLE_FIELDS, Event, EventFields, EventId
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore, MediaStore

logger = logging.getLogger(__name__)

EVENT_IMAGE_FOLDER = "event/images"


def merge_fields(event: Event, fields: EventFields) -> Event:
    """Overwrite event attributes with every truthy supplied value.

    Falsy values ("", 0, False, None) count as not supplied, so the
    current value is kept.
    """
    changes = {}
    for name in MERGEABLE_FIELDS:
        value = getattr(fields, name)
        if value:
            changes[name] = value
    return replace(event, **changes)


class EventService:
    """Service for the event lifecycle, keeping records and images consistent."""

    def __init__(
        self,
        store: EventStore,
        media: MediaStore,
        image_folder: str = EVENT_IMAGE_FOLDER,
    ) -> None:
        self._store = store
        self._media = media
        self._image_folder = image_folder

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        return self._require_event(event_id)

    def create_event(self, fields: EventFields, image_file: IO[bytes] | None = None) -> Event:
        """Create an event, uploading its image first when one is given.

        Raises:
            MediaUploadError: If the upload fails. Nothing is persisted.
            PersistenceError: If the store fails.
        """
        image = None
        if image_file is not None:
            image = self._media.upload(image_file, self._image_folder)

        event = self._store.insert_event(fields, image)
        logger.info("Created event %s (image=%s)", event.id, event.image_id)
        return event

    def update_event(
        self,
        event_id: str,
        fields: EventFields,
        image_file: IO[bytes] | None = None,
    ) -> Event:
        """Merge supplied fields into an event and optionally replace its image.

        The previous image is deleted before the new one is uploaded. If the
        upload then fails, the record keeps pointing at the deleted image.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            MediaDeleteError: If the previous image could not be deleted.
                No upload is attempted and nothing is persisted.
            MediaUploadError: If the new image could not be uploaded.
            PersistenceError: If the store fails.
        """
        current = self._require_event(event_id)
        updated = merge_fields(current, fields)

        if image_file is not None:
            if current.image is not None:
                self._media.delete(current.image.image_id)
                logger.info("Deleted image %s of event %s", current.image.image_id, current.id)
            image = self._media.upload(image_file, self._image_folder)
            updated = replace(updated, image=image)

        event = self._store.save_event(updated)
        logger.info("Updated event %s (image=%s)", event.id, event.image_id)
        return event

    def delete_event(self, event_id: str) -> EventId:
        """Delete an event record. Its remote image is left in place.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            PersistenceError: If the store fails.
        """
        event = self._require_event(event_id)
        self._store.delete_event(event.id)
        logger.info("Deleted event %s (orphaned image=%s)", event.id, event.image_id)
        return event.id

    def _require_event(self, event_id: str) -> Event:
        try:
            parsed = EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc

        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
