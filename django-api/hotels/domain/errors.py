"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class RegistrationNotFoundError(DomainError):
    """Raised when the user has no enrollment or no ticket."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Enrollment or ticket not found",
        )
        object.__setattr__(self, "user_id", user_id)


class HotelNotFoundError(DomainError):
    """Raised when a hotel does not exist or no hotels exist at all."""

    def __init__(self, hotel_id: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found" if hotel_id is not None else "No hotels found",
        )
        object.__setattr__(self, "hotel_id", hotel_id)


class PaymentRequiredError(DomainError):
    """Raised when the user's ticket does not grant hotel access."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_REQUIRED,
            message="Ticket does not grant hotel access",
        )
