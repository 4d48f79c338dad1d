"""In-memory store implementations.

Used where a database is not wanted, such as service unit tests.
Insertion order is preserved.
"""

from collections.abc import Iterable
from dataclasses import replace

from hotels.domain import Enrollment, EnrollmentId, Hotel, HotelId, Ticket, UserId
from hotels.stores.interfaces import EnrollmentStore, HotelStore


class InMemoryEnrollmentStore(EnrollmentStore):
    """Enrollment store over lists of enrollments and tickets."""

    def __init__(
        self,
        enrollments: Iterable[Enrollment] = (),
        tickets: Iterable[Ticket] = (),
    ) -> None:
        self._enrollments = list(enrollments)
        self._tickets = list(tickets)

    def get_enrollment_for_user(self, user_id: UserId) -> Enrollment | None:
        return next((e for e in self._enrollments if e.user_id == user_id), None)

    def get_ticket_for_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        return next((t for t in self._tickets if t.enrollment_id == enrollment_id), None)


class InMemoryHotelStore(HotelStore):
    """Hotel store over a list of hotels with their rooms."""

    def __init__(self, hotels: Iterable[Hotel] = ()) -> None:
        self._hotels = list(hotels)

    def list_hotels(self) -> list[Hotel]:
        return [replace(hotel, rooms=()) for hotel in self._hotels]

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        return next((h for h in self._hotels if h.id == hotel_id), None)
