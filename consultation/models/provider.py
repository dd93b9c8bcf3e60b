"""Read-only records supplied by the caller: the provider and the patient."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Provider(BaseModel):
    """A physiotherapist offering consultations."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    specialty: str
    price: float
    rating: float = 0.0
    experience: str = ""  # e.g. "8 anos"


class Patient(BaseModel):
    """The authenticated patient making the booking."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
