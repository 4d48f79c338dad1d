"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Read the authenticated user from the request
- Call services for business logic
- Map domain errors to HTTP responses with an empty body
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain import UserId
from hotels.domain.errors import DomainError, ErrorCode
from hotels.handlers.serializers import HotelDetailSerializer, HotelSerializer
from hotels.services import HotelService, build_hotel_service

ERROR_STATUS = {
    ErrorCode.REGISTRATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
}


def error_response(error: DomainError) -> Response:
    return Response(status=ERROR_STATUS[error.code])


class HotelView(APIView):
    """Base handler wiring the hotel service."""

    def get_service(self) -> HotelService:
        return build_hotel_service()

    def get_user_id(self, request: Request) -> UserId:
        return UserId(request.user.pk)


class HotelListView(HotelView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = self.get_service().list_hotels(self.get_user_id(request))
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(HotelView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = self.get_service().get_hotel(self.get_user_id(request), hotel_id)
        except DomainError as error:
            return error_response(error)
        return Response(HotelDetailSerializer(hotel).data)
