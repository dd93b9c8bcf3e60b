"""In-process collaborators for local wiring and tests."""

from __future__ import annotations

import logging
from typing import Optional

from consultation.models import BookingRequest, BookingResult, Patient
from consultation.ports.base import IdentityProvider, SubmissionPort

log = logging.getLogger("consultation.ports.memory")


class StaticIdentityProvider(IdentityProvider):
    """Returns a fixed patient, or None when constructed without one."""

    def __init__(self, patient: Optional[Patient] = None) -> None:
        self._patient = patient

    def sign_in(self, patient: Patient) -> None:
        self._patient = patient

    def sign_out(self) -> None:
        self._patient = None

    def get_current_user(self) -> Optional[Patient]:
        return self._patient


class InMemorySchedulingPort(SubmissionPort):
    """Records every request and answers with a configurable result."""

    def __init__(self, result: BookingResult | None = None) -> None:
        self.result = result or BookingResult(success=True)
        self.requests: list[BookingRequest] = []

    async def book_consultation(self, request: BookingRequest) -> BookingResult:
        self.requests.append(request)
        log.debug("Recorded booking request #%d", len(self.requests))
        return self.result
