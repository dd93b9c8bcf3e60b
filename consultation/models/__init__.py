"""Data models for the booking flow."""

from .booking import (
    ADDRESS_FIELDS,
    Address,
    BookingRequest,
    BookingResult,
    ConsultationDetails,
    ConsultationMode,
    InPerson,
    Remote,
)
from .draft import BookingDraft, BookingSummary, SubmissionState, SubmissionStatus
from .provider import Patient, Provider

__all__ = [
    "ADDRESS_FIELDS",
    "Address",
    "BookingDraft",
    "BookingRequest",
    "BookingResult",
    "BookingSummary",
    "ConsultationDetails",
    "ConsultationMode",
    "InPerson",
    "Patient",
    "Provider",
    "Remote",
    "SubmissionState",
    "SubmissionStatus",
]
