"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(db):
    return factories.create_user()


@pytest.fixture
def auth_client(user) -> APIClient:
    """Client authenticated as `user` with a valid session token."""
    client = APIClient()
    token = factories.generate_valid_token(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client
