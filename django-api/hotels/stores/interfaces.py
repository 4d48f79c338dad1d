"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Enrollment, EnrollmentId, Hotel, HotelId, Ticket, UserId


class EnrollmentStore(ABC):
    """Interface for enrollment and ticket reads."""

    @abstractmethod
    def get_enrollment_for_user(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment, or None if not enrolled."""
        ...

    @abstractmethod
    def get_ticket_for_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the enrollment's ticket with its type, or None if none was bought."""
        ...


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id, without rooms."""
        ...

    @abstractmethod
    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with its rooms ordered by id, or None if not found."""
        ...
