"""Persistence models for authenticated sessions."""

from django.conf import settings
from django.db import models


class Session(models.Model):
    """A bearer token is accepted only while its session row exists."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="api_sessions"
    )
    token = models.TextField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Session for user {self.user_id}"
