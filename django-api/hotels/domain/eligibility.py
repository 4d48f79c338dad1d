"""Access decision for hotel data."""

from enum import Enum


class Eligibility(Enum):
    """Outcome of checking whether a user may view hotel data.

    The single denial variant does not say which ticket rule failed.
    """

    ALLOWED = "ALLOWED"
    NOT_FOUND = "NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
