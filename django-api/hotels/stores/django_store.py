"""Django ORM implementations of the stores."""

from enrollments import models as enrollment_models
from hotels import models as hotel_models
from hotels.domain import (
    Capacity,
    Enrollment,
    EnrollmentId,
    Hotel,
    HotelId,
    Room,
    RoomId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore


def _to_room(row: hotel_models.Room) -> Room:
    return Room(
        id=RoomId(row.id),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_hotel(row: hotel_models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


def _to_ticket(row: enrollment_models.Ticket) -> Ticket:
    ticket_type = row.ticket_type
    return Ticket(
        id=TicketId(row.id),
        enrollment_id=EnrollmentId(row.enrollment_id),
        status=TicketStatus(row.status),
        ticket_type=TicketType(
            id=TicketTypeId(ticket_type.id),
            name=ticket_type.name,
            price=ticket_type.price,
            is_remote=ticket_type.is_remote,
            includes_hotel=ticket_type.includes_hotel,
        ),
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment store backed by the enrollments app tables."""

    def get_enrollment_for_user(self, user_id: UserId) -> Enrollment | None:
        row = enrollment_models.Enrollment.objects.filter(user_id=user_id.value).first()
        if row is None:
            return None
        return Enrollment(id=EnrollmentId(row.id), user_id=UserId(row.user_id))

    def get_ticket_for_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        row = (
            enrollment_models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id.value)
            .first()
        )
        if row is None:
            return None
        return _to_ticket(row)


class DjangoHotelStore(HotelStore):
    """Hotel store backed by the hotels app tables."""

    def list_hotels(self) -> list[Hotel]:
        return [_to_hotel(row) for row in hotel_models.Hotel.objects.all()]

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        row = (
            hotel_models.Hotel.objects.prefetch_related("rooms")
            .filter(pk=hotel_id.value)
            .first()
        )
        if row is None:
            return None
        return _to_hotel(row, rooms=tuple(_to_room(room) for room in row.rooms.all()))
