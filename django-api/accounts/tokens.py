"""Issue signed bearer tokens backed by a persisted session."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from django.conf import settings
from jose import jwt

from accounts.models import Session


def encode_token(user_id: int, expires_at: datetime | None = None) -> str:
    """Sign a token carrying the user id and a unique jti.

    Without an explicit expiry the token lives for JWT_EXPIRATION_HOURS.
    """
    if expires_at is None:
        expires_at = datetime.now(timezone.utc) + timedelta(
            hours=settings.JWT_EXPIRATION_HOURS
        )
    claims = {"userId": user_id, "exp": expires_at, "jti": uuid4().hex}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_session(user) -> str:
    """Sign a token for the user and persist the session that keeps it valid."""
    token = encode_token(user.pk)
    Session.objects.create(user=user, token=token)
    return token
