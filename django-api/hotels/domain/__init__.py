from hotels.domain.eligibility import Eligibility
from hotels.domain.models import Enrollment, Hotel, Room, Ticket, TicketType
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

__all__ = [
    "Eligibility",
    "Enrollment",
    "Hotel",
    "Room",
    "Ticket",
    "TicketType",
    "Capacity",
    "EnrollmentId",
    "HotelId",
    "RoomId",
    "TicketId",
    "TicketStatus",
    "TicketTypeId",
    "UserId",
]
