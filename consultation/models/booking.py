"""Pydantic models for booking requests and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ConsultationMode(str, Enum):
    """Where the consultation happens."""

    IN_PERSON = "in_person"  # home visit, address required
    REMOTE = "remote"        # video call


# Values the scheduling service expects in the "type" field
WIRE_MODES = {
    ConsultationMode.IN_PERSON: "presencial",
    ConsultationMode.REMOTE: "online",
}

ADDRESS_FIELDS = ("street", "number", "neighborhood", "city", "state")


class Address(BaseModel):
    """Service address for a home visit. All five fields are required together."""

    street: str = ""
    number: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""  # two-letter UF, upper-cased on input

    def missing_fields(self) -> list[str]:
        return [f"address.{name}" for name in ADDRESS_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def formatted_line(self) -> str:
        """Street line as the scheduling service stores it."""
        return f"{self.street}, {self.number} - {self.neighborhood}"


@dataclass(frozen=True)
class InPerson:
    address: Address


@dataclass(frozen=True)
class Remote:
    pass


ConsultationDetails = Union[InPerson, Remote]


class BookingRequest(BaseModel):
    """Payload sent to the scheduling service. Derived from a valid draft."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    patient_id: str = Field(alias="patientId")
    provider_id: str = Field(alias="physiotherapistId")
    provider_name: str = Field(alias="physiotherapistName")
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    mode: ConsultationMode = Field(alias="type")
    specialty: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    price: float
    notes: str = ""

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the scheduling service's JSON body. Absent fields are omitted."""
        body = self.model_dump(by_alias=True, exclude_none=True)
        body["type"] = WIRE_MODES[self.mode]
        return body


class BookingResult(BaseModel):
    """Outcome reported by the submission port."""

    success: bool
    error: Optional[str] = None
