"""Domain error codes for the upcoming events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_INDEX = "INVALID_INDEX"
    STORE_ERROR = "STORE_ERROR"


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


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidIndexError(DomainError):
    """Raised when a row index falls outside the displayed list.

    This is a caller contract violation, not a recoverable condition.
    """

    def __init__(self, index: int, row_count: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INDEX,
            message=f"Row {index} is out of range for {row_count} rows",
        )
        self.index = index
        self.row_count = row_count


class StoreError(DomainError):
    """Raised when the event store fails an operation."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_ERROR,
            message=f"Event store failed during {operation}",
        )
        self.operation = operation
        self.reason = reason
