"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py and enrollments/models.py.
"""

from dataclasses import dataclass
from datetime import datetime

from hotels.domain.value_objects import (
    Capacity,
    EnrollmentId,
    HotelId,
    RoomId,
    TicketId,
    TicketStatus,
    TicketTypeId,
    UserId,
)


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of a user's enrollment."""

    id: EnrollmentId
    user_id: UserId


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    enrollment_id: EnrollmentId
    status: TicketStatus
    ticket_type: TicketType

    @property
    def grants_hotel_access(self) -> bool:
        """A paid, in-person ticket whose type includes the hotel."""
        return (
            self.status is not TicketStatus.RESERVED
            and not self.ticket_type.is_remote
            and self.ticket_type.includes_hotel
        )


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: RoomId
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel."""

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] = ()
