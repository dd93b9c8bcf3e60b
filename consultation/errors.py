"""Failure categories for a booking attempt."""

from __future__ import annotations


class BookingError(Exception):
    """Base class for every booking failure the controller surfaces."""


class ValidationError(BookingError):
    """Required fields are missing. Never reaches the scheduling service."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(
            "missing required fields: " + ", ".join(self.missing_fields)
        )


class IdentityError(BookingError):
    """No authenticated patient is available."""

    def __init__(self, message: str = "no authenticated user") -> None:
        super().__init__(message)


class SubmissionError(BookingError):
    """The scheduling service rejected the request or faulted."""


class SubmissionInFlightError(BookingError):
    """A second submit was attempted while one is still in flight."""

    def __init__(self) -> None:
        super().__init__("a booking submission is already in flight")
