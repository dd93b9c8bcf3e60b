"""Tests for booking models and the request wire format."""

import pytest
from pydantic import ValidationError as PydanticValidationError

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from consultation.models import (
    Address,
    BookingDraft,
    BookingRequest,
    ConsultationMode,
    Provider,
    SubmissionState,
    SubmissionStatus,
)


def _request(**overrides) -> BookingRequest:
    fields = dict(
        patient_id="pat-1",
        provider_id="phy-1",
        provider_name="Dra. Ana Souza",
        date="2025-03-10",
        time="09:00",
        mode=ConsultationMode.REMOTE,
        specialty="Ortopedia",
        price=120.0,
        notes="",
    )
    fields.update(overrides)
    return BookingRequest(**fields)


class TestAddress:
    def test_empty_address_missing_everything(self):
        assert Address().missing_fields() == [
            "address.street", "address.number", "address.neighborhood",
            "address.city", "address.state",
        ]

    def test_complete(self):
        addr = Address(street="Rua A", number="10", neighborhood="Centro",
                       city="Recife", state="PE")
        assert addr.is_complete is True
        assert addr.formatted_line() == "Rua A, 10 - Centro"


class TestBookingRequest:
    def test_remote_wire_omits_address(self):
        body = _request().to_wire()
        assert body["type"] == "online"
        assert body["patientId"] == "pat-1"
        assert body["physiotherapistId"] == "phy-1"
        assert body["physiotherapistName"] == "Dra. Ana Souza"
        assert "address" not in body
        assert "city" not in body
        assert "state" not in body

    def test_empty_notes_are_sent(self):
        assert _request().to_wire()["notes"] == ""

    def test_in_person_wire(self):
        body = _request(
            mode=ConsultationMode.IN_PERSON,
            address="Rua A, 10 - Centro", city="Recife", state="PE",
        ).to_wire()
        assert body["type"] == "presencial"
        assert body["address"] == "Rua A, 10 - Centro"
        assert body["city"] == "Recife"
        assert body["state"] == "PE"

    def test_frozen(self):
        req = _request()
        with pytest.raises(PydanticValidationError):
            req.date = "2025-03-11"

    def test_accepts_wire_aliases(self):
        req = BookingRequest.model_validate({
            "patientId": "p", "physiotherapistId": "x",
            "physiotherapistName": "n", "date": "2025-03-10", "time": "08:00",
            "type": "remote", "specialty": "s", "price": 90,
        })
        assert req.mode is ConsultationMode.REMOTE


class TestDraftAndState:
    def test_draft_defaults(self):
        draft = BookingDraft()
        assert draft.mode == ConsultationMode.IN_PERSON
        assert draft.date == ""
        assert draft.address == Address()

    def test_failed_state_carries_reason(self):
        state = SubmissionState.failed("slot taken")
        assert state.status == SubmissionStatus.FAILED
        assert state.to_dict() == {"status": "failed", "reason": "slot taken"}

    def test_idle_has_no_reason(self):
        assert SubmissionState.idle().reason is None


class TestProvider:
    def test_provider_is_read_only(self):
        provider = Provider(id="phy-1", name="Ana", specialty="RPG", price=100)
        with pytest.raises(PydanticValidationError):
            provider.price = 1
