"""Row factories for integration tests."""

from datetime import date
from itertools import count

from django.contrib.auth import get_user_model

from accounts.tokens import create_session
from enrollments.models import Enrollment, Ticket, TicketStatus, TicketType
from hotels.models import Hotel, Room

_sequence = count(1)


def create_user():
    n = next(_sequence)
    return get_user_model().objects.create_user(
        username=f"user{n}", email=f"user{n}@example.com", password="secret-password"
    )


def generate_valid_token(user=None) -> str:
    return create_session(user or create_user())


def create_enrollment(user) -> Enrollment:
    return Enrollment.objects.create(
        user=user,
        name=f"Enrollee {user.pk}",
        cpf="123.456.789-09",
        birthday=date(1990, 5, 17),
        phone="(21) 98999-9999",
    )


def create_ticket_type(is_remote: bool, includes_hotel: bool) -> TicketType:
    return TicketType.objects.create(
        name=f"Ticket type {next(_sequence)}",
        price=25000,
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    )


def create_ticket(enrollment: Enrollment, ticket_type: TicketType, status: str) -> Ticket:
    return Ticket.objects.create(enrollment=enrollment, ticket_type=ticket_type, status=status)


def create_eligible_user():
    user = create_user()
    enrollment = create_enrollment(user)
    create_ticket(enrollment, create_ticket_type(False, True), TicketStatus.PAID)
    return user


def create_hotel() -> Hotel:
    n = next(_sequence)
    return Hotel.objects.create(name=f"Hotel {n}", image=f"https://example.com/hotels/{n}.jpg")


def create_rooms(hotel: Hotel) -> list[Room]:
    return [
        Room.objects.create(hotel=hotel, name=f"Room {next(_sequence)}", capacity=2),
        Room.objects.create(hotel=hotel, name=f"Room {next(_sequence)}", capacity=2),
    ]
