"""The mutable booking draft and the submission lifecycle state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .booking import Address, ConsultationMode


class BookingDraft(BaseModel):
    """Fields entered by the patient so far.

    The address is kept while the mode is remote so that switching back to
    in-person restores what was typed. It is only validated and sent for
    in-person consultations.
    """

    date: str = ""  # YYYY-MM-DD, empty until a day is picked
    time: str = ""  # HH:MM, empty until a slot is picked
    mode: ConsultationMode = ConsultationMode.IN_PERSON
    address: Address = Field(default_factory=Address)
    notes: str = ""


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    status: SubmissionStatus = SubmissionStatus.IDLE
    reason: Optional[str] = None  # set only when failed

    @classmethod
    def idle(cls) -> "SubmissionState":
        return cls(SubmissionStatus.IDLE)

    @classmethod
    def submitting(cls) -> "SubmissionState":
        return cls(SubmissionStatus.SUBMITTING)

    @classmethod
    def succeeded(cls) -> "SubmissionState":
        return cls(SubmissionStatus.SUCCEEDED)

    @classmethod
    def failed(cls, reason: str) -> "SubmissionState":
        return cls(SubmissionStatus.FAILED, reason)

    def to_dict(self) -> dict:
        return {"status": self.status.value, "reason": self.reason}


@dataclass(frozen=True)
class BookingSummary:
    """Read-only projection shown once a date and time are picked."""

    date_label: str   # "segunda-feira, 10 de março às 09:00"
    mode_icon: str
    mode_label: str
    price_label: str  # "R$ 120"
