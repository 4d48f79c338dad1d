"""Bearer token authentication for the REST API.

A request is authenticated when:
- the Authorization header carries "Bearer <token>"
- the token signature and expiry verify against JWT_SECRET
- a Session row holds that exact token for the user named in the token
"""

import logging

from django.conf import settings
from django.contrib.auth.models import AbstractBaseUser
from jose import JWTError, jwt
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from accounts.models import Session

logger = logging.getLogger(__name__)


class BearerSessionAuthentication(BaseAuthentication):
    """Authenticate requests against signed tokens and persisted sessions."""

    keyword = "Bearer"

    def authenticate(self, request: Request) -> tuple[AbstractBaseUser, str] | None:
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None

        if len(parts) != 2:
            logger.info("Rejected malformed Authorization header")
            raise AuthenticationFailed("Invalid token header")

        try:
            token = parts[1].decode()
        except UnicodeError:
            raise AuthenticationFailed("Invalid token header") from None

        return self._authenticate_token(token)

    def _authenticate_token(self, token: str) -> tuple[AbstractBaseUser, str]:
        try:
            claims = jwt.decode(
                token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
            )
        except JWTError:
            logger.info("Rejected token with invalid signature or expiry")
            raise AuthenticationFailed("Invalid token") from None

        user_id = claims.get("userId")
        if user_id is None:
            logger.info("Rejected token without userId claim")
            raise AuthenticationFailed("Invalid token")

        session = Session.objects.select_related("user").filter(token=token).first()
        if session is None or session.user_id != user_id:
            logger.info("Rejected token without a matching session for user %s", user_id)
            raise AuthenticationFailed("Session not found")

        return session.user, token

    def authenticate_header(self, request: Request) -> str:
        return self.keyword
