"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import IO

from events.domain import Event, EventFields, EventId, ImageAsset


class EventStore(ABC):
    """Interface for event persistence operations.

    Implementations raise PersistenceError when the underlying storage fails.
    """

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def insert_event(self, fields: EventFields, image: ImageAsset | None) -> Event:
        """Persist a new event and return it with its assigned ID."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> Event:
        """Overwrite the stored event with the same ID and return it."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Remove an event."""
        ...


class MediaStore(ABC):
    """Interface for the remote image host.

    Each call makes at most one remote request and never retries.
    """

    @abstractmethod
    def upload(self, image_file: IO[bytes], folder: str) -> ImageAsset:
        """Store an image under a logical folder.

        Raises:
            MediaUploadError: On transport, auth or quota failure.
        """
        ...

    @abstractmethod
    def delete(self, image_id: str) -> None:
        """Remove a previously stored image.

        Raises:
            MediaDeleteError: If the id is unknown or the remote call fails.
        """
        ...
