"""Shared draft validator.

The presentation layer calls it to enable the submit button and the
controller calls it again inside ``submit()``. Both go through
``missing_fields`` so the rules live in one place.
"""

from __future__ import annotations

from consultation.errors import ValidationError
from consultation.models import (
    BookingDraft,
    ConsultationDetails,
    ConsultationMode,
    InPerson,
    Remote,
)


def missing_fields(draft: BookingDraft) -> list[str]:
    """Names of the fields that block submission, in form order."""
    missing = []
    if not draft.date:
        missing.append("date")
    if not draft.time:
        missing.append("time")
    if draft.mode == ConsultationMode.IN_PERSON:
        missing.extend(draft.address.missing_fields())
    return missing


def is_submittable(draft: BookingDraft) -> bool:
    return not missing_fields(draft)


def consultation_details(draft: BookingDraft) -> ConsultationDetails:
    """Collapse mode + address into ``InPerson`` or ``Remote``.

    Raises:
        ValidationError: if the draft cannot be submitted.
    """
    missing = missing_fields(draft)
    if missing:
        raise ValidationError(missing)
    if draft.mode == ConsultationMode.IN_PERSON:
        return InPerson(address=draft.address.model_copy())
    return Remote()
