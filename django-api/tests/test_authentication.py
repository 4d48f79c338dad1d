"""Tests for bearer token authentication and session issuing.

Run with: pytest tests/test_authentication.py -v
"""

import pytest
from django.conf import settings
from jose import jwt
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory

from accounts.authentication import BearerSessionAuthentication
from accounts.models import Session
from accounts.tokens import create_session, encode_token
from tests import factories


def request_with(header: str | None):
    extra = {} if header is None else {"HTTP_AUTHORIZATION": header}
    return APIRequestFactory().get("/hotels", **extra)


@pytest.mark.django_db
class TestCreateSession:
    """Tests for create_session."""

    def test_persists_session_for_token(self, user):
        token = create_session(user)
        assert Session.objects.filter(user=user, token=token).exists()

    def test_token_carries_user_id(self, user):
        token = create_session(user)
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        assert claims["userId"] == user.pk
        assert "exp" in claims

    def test_back_to_back_sessions_get_distinct_tokens(self, user):
        first = create_session(user)
        second = create_session(user)

        assert first != second
        assert Session.objects.filter(user=user).count() == 2
        for token in (first, second):
            authenticated_user, _ = BearerSessionAuthentication().authenticate(
                request_with(f"Bearer {token}")
            )
            assert authenticated_user == user


@pytest.mark.django_db
class TestBearerSessionAuthentication:
    """Tests for BearerSessionAuthentication."""

    def test_missing_header_is_anonymous(self):
        assert BearerSessionAuthentication().authenticate(request_with(None)) is None

    def test_other_scheme_is_anonymous(self):
        request = request_with("Basic dXNlcjpwYXNz")
        assert BearerSessionAuthentication().authenticate(request) is None

    def test_malformed_header_fails(self):
        with pytest.raises(AuthenticationFailed):
            BearerSessionAuthentication().authenticate(request_with("Bearer"))

    def test_valid_session_authenticates_user(self, user):
        token = create_session(user)

        authenticated_user, auth = BearerSessionAuthentication().authenticate(
            request_with(f"Bearer {token}")
        )

        assert authenticated_user == user
        assert auth == token

    def test_token_signed_with_other_secret_fails(self, user):
        token = jwt.encode({"userId": user.pk}, "another-secret", algorithm="HS256")
        Session.objects.create(user=user, token=token)

        with pytest.raises(AuthenticationFailed):
            BearerSessionAuthentication().authenticate(request_with(f"Bearer {token}"))

    def test_token_without_user_claim_fails(self, user):
        token = jwt.encode({"sub": "x"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        Session.objects.create(user=user, token=token)

        with pytest.raises(AuthenticationFailed):
            BearerSessionAuthentication().authenticate(request_with(f"Bearer {token}"))

    def test_session_of_other_user_fails(self, user):
        other = factories.create_user()
        token = encode_token(other.pk)
        Session.objects.create(user=user, token=token)

        with pytest.raises(AuthenticationFailed):
            BearerSessionAuthentication().authenticate(request_with(f"Bearer {token}"))

    def test_deleted_session_fails(self, user):
        token = create_session(user)
        Session.objects.filter(token=token).delete()

        with pytest.raises(AuthenticationFailed):
            BearerSessionAuthentication().authenticate(request_with(f"Bearer {token}"))
