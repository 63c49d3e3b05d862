"""Domain error codes for the events module."""

import copyreg
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    MEDIA_UPLOAD_FAILED = "MEDIA_UPLOAD_FAILED"
    MEDIA_DELETE_FAILED = "MEDIA_DELETE_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __reduce__(self):
        # Rebuild without __init__; subclass attributes come back from __dict__.
        return (copyreg.__newobj__, (type(self), *self.args), self.__dict__)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class MediaUploadError(DomainError):
    """Raised when the media store rejects or fails an upload."""

    def __init__(self, folder: str) -> None:
        super().__init__(
            code=ErrorCode.MEDIA_UPLOAD_FAILED,
            message="Image upload failed",
        )
        self.folder = folder


class MediaDeleteError(DomainError):
    """Raised when a stored image cannot be confirmed deleted."""

    def __init__(self, image_id: str) -> None:
        super().__init__(
            code=ErrorCode.MEDIA_DELETE_FAILED,
            message="Image delete failed",
        )
        self.image_id = image_id


class PersistenceError(DomainError):
    """Raised when the underlying storage fails."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILED,
            message="Event storage unavailable",
        )
        self.operation = operation
