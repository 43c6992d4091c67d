"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

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


class InvalidArgumentError(DomainError):
    """Raised when an operation receives a missing or out-of-range input."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
        )


class InvalidEventIdError(InvalidArgumentError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        DomainError.__init__(
            self,
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )
