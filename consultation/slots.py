"""Selectable appointment days and the fixed catalog of hour marks.

Days are generated from a reference instant: day 1 is tomorrow in the
booking timezone. Hours are static for every provider and date; real
availability is left to the scheduling service.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from consultation.config import settings

# Morning block, lunch break, afternoon/evening block
TIME_SLOTS: tuple[str, ...] = (
    "08:00", "09:00", "10:00", "11:00",
    "14:00", "15:00", "16:00", "17:00", "18:00",
)

# pt-BR names, Monday first to match date.weekday()
_WEEKDAYS_LONG = (
    "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
    "sexta-feira", "sábado", "domingo",
)
_WEEKDAYS_SHORT = ("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom.")
_MONTHS_LONG = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)
_MONTHS_SHORT = (
    "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
    "jul.", "ago.", "set.", "out.", "nov.", "dez.",
)


@dataclass(frozen=True)
class DaySlot:
    """One offered day: canonical value plus display label."""

    value: str  # YYYY-MM-DD
    label: str  # "seg., 10 de mar."


def format_short_date(day: date) -> str:
    return f"{_WEEKDAYS_SHORT[day.weekday()]}, {day.day} de {_MONTHS_SHORT[day.month - 1]}"


def format_long_date(value: str | date) -> str:
    """Long pt-BR form of a day, e.g. ``segunda-feira, 10 de março``.

    Accepts a ``date`` or a ``YYYY-MM-DD`` string. The string is read as a
    calendar date, never as a UTC instant, so the weekday cannot shift.
    """
    day = date.fromisoformat(value) if isinstance(value, str) else value
    return f"{_WEEKDAYS_LONG[day.weekday()]}, {day.day} de {_MONTHS_LONG[day.month - 1]}"


def generate_days(count: int, reference: datetime | None = None) -> list[DaySlot]:
    """Return ``count`` day slots for the days strictly after ``reference``.

    Args:
        count: Number of days to offer. Must be a non-negative int.
        reference: Instant to count from. Naive datetimes are taken as
            local to the booking timezone; aware ones are converted to it.
            Defaults to now.

    Raises:
        ValueError: if ``count`` is negative or not an int.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be an int, got {count!r}")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    tz = ZoneInfo(settings.booking_timezone)
    if reference is None:
        reference = datetime.now(tz=tz)
    elif reference.tzinfo is not None:
        reference = reference.astimezone(tz)

    today = reference.date()
    days = []
    for offset in range(1, count + 1):
        day = today + timedelta(days=offset)
        days.append(DaySlot(value=day.isoformat(), label=format_short_date(day)))
    return days
