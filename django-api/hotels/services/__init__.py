from hotels.services.eligibility_service import EligibilityService
from hotels.services.hotel_service import HotelService


def build_hotel_service() -> HotelService:
    """Wire the hotel service to the Django ORM stores."""
    from hotels.stores.django_store import DjangoEnrollmentStore, DjangoHotelStore

    return HotelService(
        hotels=DjangoHotelStore(),
        eligibility=EligibilityService(DjangoEnrollmentStore()),
    )


__all__ = ["EligibilityService", "HotelService", "build_hotel_service"]
