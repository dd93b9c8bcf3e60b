"""Abstract collaborators consumed by the booking controller.

Any identity source (session store, token introspection, ...) implements
``IdentityProvider``; any scheduling backend implements ``SubmissionPort``.
"""

from abc import ABC, abstractmethod
from typing import Optional

from consultation.models import BookingRequest, BookingResult, Patient


class IdentityProvider(ABC):
    """Lookup of the authenticated patient."""

    @abstractmethod
    def get_current_user(self) -> Optional[Patient]:
        """Return the authenticated patient, or None when nobody is signed in.

        Must be synchronous and free of side effects. Absence is an
        expected outcome, not an error.
        """


class SubmissionPort(ABC):
    """Scheduling backend that confirms bookings."""

    @abstractmethod
    async def book_consultation(self, request: BookingRequest) -> BookingResult:
        """Submit one booking request.

        Args:
            request: The fully assembled booking payload.

        Returns:
            BookingResult with ``success`` and, on failure, an optional
            ``error`` message suitable for showing to the patient.

        Implementations may also raise; the caller treats any exception
        as a failed attempt. No retries are expected here.
        """
