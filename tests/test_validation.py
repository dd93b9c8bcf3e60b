"""Tests for the shared draft validator."""

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from consultation.errors import ValidationError
from consultation.models import Address, BookingDraft, ConsultationMode, InPerson, Remote
from consultation.validation import consultation_details, is_submittable, missing_fields


FULL_ADDRESS = Address(
    street="Av. Paulista", number="1000", neighborhood="Bela Vista",
    city="São Paulo", state="SP",
)


class TestMissingFields:
    def test_empty_draft(self):
        assert missing_fields(BookingDraft()) == [
            "date", "time",
            "address.street", "address.number", "address.neighborhood",
            "address.city", "address.state",
        ]

    def test_remote_only_needs_date_and_time(self):
        draft = BookingDraft(mode=ConsultationMode.REMOTE)
        assert missing_fields(draft) == ["date", "time"]

    def test_whitespace_counts_as_filled(self):
        draft = BookingDraft(
            date="2025-03-10", time="09:00",
            address=Address(street=" ", number=" ", neighborhood=" ", city=" ", state=" "),
        )
        assert is_submittable(draft) is True


class TestConsultationDetails:
    def test_in_person(self):
        draft = BookingDraft(date="2025-03-10", time="09:00", address=FULL_ADDRESS)
        details = consultation_details(draft)
        assert isinstance(details, InPerson)
        assert details.address == FULL_ADDRESS

    def test_in_person_address_is_a_copy(self):
        draft = BookingDraft(date="2025-03-10", time="09:00", address=FULL_ADDRESS.model_copy())
        details = consultation_details(draft)
        draft.address.city = "Campinas"
        assert details.address.city == "São Paulo"

    def test_remote_ignores_latent_address(self):
        draft = BookingDraft(
            date="2025-03-10", time="09:00",
            mode=ConsultationMode.REMOTE, address=Address(street="half"),
        )
        assert isinstance(consultation_details(draft), Remote)

    def test_invalid_raises_with_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            consultation_details(BookingDraft(mode=ConsultationMode.REMOTE))
        assert exc_info.value.missing_fields == ["date", "time"]
        assert str(exc_info.value) == "missing required fields: date, time"
