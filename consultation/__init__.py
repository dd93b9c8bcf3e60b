"""Consultation booking: day/time slots, form controller and scheduling ports."""

from .controller import BookingFormController
from .slots import TIME_SLOTS, DaySlot, generate_days

__all__ = ["BookingFormController", "DaySlot", "TIME_SLOTS", "generate_days"]
