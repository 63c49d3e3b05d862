"""Django ORM implementation of the EventStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError

from events.domain import Event, EventFields, EventId, ImageAsset
from events.domain.errors import EventNotFoundError, PersistenceError
from events.models import Event as EventModel
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        raise PersistenceError(operation) from exc


def _to_domain(row: EventModel) -> Event:
    image = None
    if row.image_url or row.image_id:
        try:
            image = ImageAsset(url=row.image_url or "", image_id=row.image_id or "")
        except ValueError as exc:
            logger.error("Event row %s holds a half image reference", row.pk)
            raise PersistenceError("read") from exc
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        status=row.status,
        description=row.description,
        date_start=row.date_start,
        date_end=row.date_end,
        image=image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        with _storage_errors("list"):
            return [_to_domain(row) for row in EventModel.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        with _storage_errors("get"):
            row = EventModel.objects.filter(pk=event_id.value).first()
        return _to_domain(row) if row else None

    def insert_event(self, fields: EventFields, image: ImageAsset | None) -> Event:
        with _storage_errors("insert"):
            row = EventModel.objects.create(
                title=fields.title,
                status=fields.status,
                description=fields.description,
                date_start=fields.date_start,
                date_end=fields.date_end,
                image_url=image.url if image else None,
                image_id=image.image_id if image else None,
            )
        logger.debug("Inserted event row %s", row.pk)
        return _to_domain(row)

    def save_event(self, event: Event) -> Event:
        with _storage_errors("save"):
            row = EventModel.objects.filter(pk=event.id.value).first()
            if row is None:
                raise EventNotFoundError(str(event.id))
            row.title = event.title
            row.status = event.status
            row.description = event.description
            row.date_start = event.date_start
            row.date_end = event.date_end
            row.image_url = event.image_url
            row.image_id = event.image_id
            row.save()
        return _to_domain(row)

    def delete_event(self, event_id: EventId) -> None:
        with _storage_errors("delete"):
            EventModel.objects.filter(pk=event_id.value).delete()
