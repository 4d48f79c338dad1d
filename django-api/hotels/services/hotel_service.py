"""Hotel service - hotel lookups for eligible users.

Services:
- Depend only on interfaces (stores)
- Check eligibility before any hotel read
- Return domain models or domain errors
"""

import logging

from hotels.domain import Hotel, HotelId, UserId
from hotels.domain.errors import HotelNotFoundError
from hotels.services.eligibility_service import EligibilityService
from hotels.stores.interfaces import HotelStore

logger = logging.getLogger(__name__)


class HotelService:
    """Service for hotel listing operations."""

    def __init__(self, hotels: HotelStore, eligibility: EligibilityService) -> None:
        self._hotels = hotels
        self._eligibility = eligibility

    def list_hotels(self, user_id: UserId) -> list[Hotel]:
        """Return all hotels, without rooms.

        Raises:
            RegistrationNotFoundError: If the user has no enrollment or ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
            HotelNotFoundError: If there are no hotels.
        """
        self._eligibility.require_access(user_id)

        hotels = self._hotels.list_hotels()
        if not hotels:
            logger.info("No hotels available for user %s", user_id)
            raise HotelNotFoundError()
        return hotels

    def get_hotel(self, user_id: UserId, hotel_id: str) -> Hotel:
        """Return a hotel with its rooms.

        Raises:
            RegistrationNotFoundError: If the user has no enrollment or ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
            HotelNotFoundError: If hotel_id is malformed or matches no hotel.
        """
        self._eligibility.require_access(user_id)

        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            logger.info("Rejected malformed hotel id %r", hotel_id)
            raise HotelNotFoundError(hotel_id) from None

        hotel = self._hotels.get_hotel_with_rooms(parsed_id)
        if hotel is None:
            logger.info("Hotel %s not found", parsed_id)
            raise HotelNotFoundError(hotel_id)
        return hotel
