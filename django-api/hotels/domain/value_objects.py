"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class IntegerId:
    """Positive integer identifier shared by all entities."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not value.isdecimal():
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


class UserId(IntegerId):
    """Unique identifier for a User."""


class EnrollmentId(IntegerId):
    """Unique identifier for an Enrollment."""


class TicketId(IntegerId):
    """Unique identifier for a Ticket."""


class TicketTypeId(IntegerId):
    """Unique identifier for a TicketType."""


class HotelId(IntegerId):
    """Unique identifier for a Hotel."""


class RoomId(IntegerId):
    """Unique identifier for a Room."""


class TicketStatus(Enum):
    """Payment state of a ticket."""

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
