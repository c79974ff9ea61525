"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DateRange:
    """Inclusive window of event dates."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("DateRange end cannot precede start")

    @classmethod
    def upcoming(cls, days: int, now: datetime) -> Self:
        if days < 0:
            raise ValueError("DateRange length cannot be negative")
        return cls(start=now, end=now + timedelta(days=days))

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end
