"""Django ORM models for enrollments and tickets (persistence layer).

Rows here are written by the enrollment and payment workflows. The hotels
app only reads them, through its stores.
"""

from django.conf import settings
from django.db import models


class TicketStatus(models.TextChoices):
    RESERVED = "RESERVED", "Reserved"
    PAID = "PAID", "Paid"


class Enrollment(models.Model):
    """Persistence model for a user's event registration."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=14)
    birthday = models.DateField()
    phone = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class TicketType(models.Model):
    """Persistence model for ticket categories."""

    name = models.CharField(max_length=100)
    price = models.PositiveIntegerField()
    is_remote = models.BooleanField()
    includes_hotel = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for a ticket bought by an enrollment."""

    enrollment = models.ForeignKey(
        Enrollment, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    status = models.CharField(max_length=16, choices=TicketStatus.choices)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.ticket_type.name} - {self.status}"
