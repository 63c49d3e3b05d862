"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ImageAsset:
    """Reference to an image hosted on the remote media store.

    The public URL and the opaque id always travel together, so an event
    either has both or neither.
    """

    url: str
    image_id: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Image URL cannot be empty")
        if not self.image_id:
            raise ValueError("Image id cannot be empty")
