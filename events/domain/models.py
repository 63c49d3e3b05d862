"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, ImageAsset


@dataclass(frozen=True)
class EventFields:
    """Caller-supplied event attributes, already validated by the handler."""

    title: str | None = None
    status: str | None = None
    description: str | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None


# Fields an update may overwrite. The image only changes through the service.
MERGEABLE_FIELDS = ("title", "status", "description", "date_start", "date_end")


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    status: str | None
    description: str | None
    date_start: datetime | None
    date_end: datetime | None
    image: ImageAsset | None
    created_at: datetime
    updated_at: datetime

    @property
    def image_url(self) -> str | None:
        return self.image.url if self.image else None

    @property
    def image_id(self) -> str | None:
        return self.image.image_id if self.image else None
