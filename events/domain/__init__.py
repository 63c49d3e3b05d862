from events.domain.models import MERGEABLE_FIELDS, Event, EventFields
from events.domain.value_objects import EventId, ImageAsset

__all__ = [
    "Event",
    "EventFields",
    "EventId",
    "ImageAsset",
    "MERGEABLE_FIELDS",
]
