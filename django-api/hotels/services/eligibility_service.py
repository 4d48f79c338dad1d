"""Eligibility service - decides whether a user may view hotel data.

Every call re-reads enrollment and ticket state, since payment can change
between requests.
"""

import logging

from hotels.domain import Eligibility, UserId
from hotels.domain.errors import PaymentRequiredError, RegistrationNotFoundError
from hotels.stores.interfaces import EnrollmentStore

logger = logging.getLogger(__name__)


class EligibilityService:
    """Service evaluating the enrollment and ticket rules for hotel access."""

    def __init__(self, store: EnrollmentStore) -> None:
        self._store = store

    def evaluate(self, user_id: UserId) -> Eligibility:
        """Return the access decision for a user.

        Checks run in order and the first failing one decides:
        enrollment exists, ticket exists, ticket grants hotel access.
        """
        enrollment = self._store.get_enrollment_for_user(user_id)
        if enrollment is None:
            logger.debug("User %s has no enrollment", user_id)
            return Eligibility.NOT_FOUND

        ticket = self._store.get_ticket_for_enrollment(enrollment.id)
        if ticket is None:
            logger.debug("Enrollment %s has no ticket", enrollment.id)
            return Eligibility.NOT_FOUND

        if not ticket.grants_hotel_access:
            logger.debug("Ticket %s does not grant hotel access", ticket.id)
            return Eligibility.PAYMENT_REQUIRED

        return Eligibility.ALLOWED

    def require_access(self, user_id: UserId) -> None:
        """Raise unless the user may view hotel data.

        Raises:
            RegistrationNotFoundError: If the user has no enrollment or no ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
        """
        decision = self.evaluate(user_id)
        if decision is Eligibility.NOT_FOUND:
            logger.info("Hotel access denied for user %s: not registered", user_id)
            raise RegistrationNotFoundError(user_id.value)
        if decision is Eligibility.PAYMENT_REQUIRED:
            logger.info("Hotel access denied for user %s: payment required", user_id)
            raise PaymentRequiredError()
