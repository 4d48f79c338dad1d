"""Smoke tests for the admin registrations.

Run with: pytest tests/test_admin.py -v
"""

import pytest
from django.urls import reverse

from enrollments.models import TicketStatus
from tests import factories


@pytest.mark.django_db
@pytest.mark.parametrize(
    "url_name",
    [
        "admin:hotels_hotel_changelist",
        "admin:hotels_room_changelist",
        "admin:enrollments_enrollment_changelist",
        "admin:enrollments_tickettype_changelist",
        "admin:enrollments_ticket_changelist",
        "admin:accounts_session_changelist",
    ],
)
def test_changelist_renders(admin_client, url_name):
    user = factories.create_user()
    enrollment = factories.create_enrollment(user)
    factories.create_ticket(enrollment, factories.create_ticket_type(False, True), TicketStatus.PAID)
    factories.create_rooms(factories.create_hotel())
    factories.generate_valid_token(user)

    response = admin_client.get(reverse(url_name))

    assert response.status_code == 200


@pytest.mark.django_db
def test_hotel_change_page_shows_room_inline(admin_client):
    hotel = factories.create_hotel()
    factories.create_rooms(hotel)

    response = admin_client.get(reverse("admin:hotels_hotel_change", args=[hotel.pk]))

    assert response.status_code == 200
    assert b"Room" in response.content
