"""Booking form controller: owns the draft and drives one booking at a time.

The controller is the single source of truth for what the patient has
entered. A presentation layer renders ``snapshot()``, ``can_submit()``,
``summary()`` and ``state`` and calls the mutators; it holds no business
rules of its own.

Typical lifecycle::

    controller = BookingFormController(provider, identity=identity, port=client)
    controller.set_date(days[0].value)
    controller.set_time("09:00")
    controller.set_mode("remote")

    state = await controller.submit()
    # state.status is SUCCEEDED or FAILED; never left SUBMITTING
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date, datetime
from typing import Any, Callable, Optional

from consultation import events, validation
from consultation.config import settings
from consultation.errors import (
    BookingError,
    IdentityError,
    SubmissionError,
    SubmissionInFlightError,
)
from consultation.events import BookingEventBroadcaster
from consultation.models import (
    ADDRESS_FIELDS,
    BookingDraft,
    BookingRequest,
    BookingSummary,
    ConsultationDetails,
    ConsultationMode,
    InPerson,
    Patient,
    Provider,
    SubmissionState,
    SubmissionStatus,
)
from consultation.ports.base import IdentityProvider, SubmissionPort
from consultation.slots import TIME_SLOTS, DaySlot, format_long_date, generate_days

log = logging.getLogger("consultation.controller")

REJECTED_FALLBACK = "failed to book consultation"
UNEXPECTED_FALLBACK = "unexpected error while booking consultation"

_MODE_DISPLAY = {
    ConsultationMode.IN_PERSON: ("🏠", "Atendimento Domiciliar"),
    ConsultationMode.REMOTE: ("💻", "Consulta Online"),
}


def redact_pii(value: str) -> str:
    """Mask PII for logging. Shows the first 3 and last 2 chars only."""
    if not value or len(value) <= 5:
        return "***"
    return value[:3] + "***" + value[-2:]


def format_price(price: float) -> str:
    """``R$ 120`` for whole amounts, ``R$ 120,50`` otherwise."""
    if float(price).is_integer():
        amount = str(int(price))
    else:
        amount = f"{price:.2f}".replace(".", ",")
    return f"{settings.currency_symbol} {amount}"


def build_request(
    draft: BookingDraft,
    details: ConsultationDetails,
    patient: Patient,
    provider: Provider,
) -> BookingRequest:
    """Assemble the payload. Address fields are only set for home visits."""
    address = city = state = None
    if isinstance(details, InPerson):
        address = details.address.formatted_line()
        city = details.address.city
        state = details.address.state

    return BookingRequest(
        patient_id=patient.id,
        provider_id=provider.id,
        provider_name=provider.name,
        date=draft.date,
        time=draft.time,
        mode=draft.mode,
        specialty=provider.specialty,
        address=address,
        city=city,
        state=state,
        price=provider.price,
        notes=draft.notes,
    )


class BookingFormController:
    """Draft state, validation and submission for one provider's booking form."""

    def __init__(
        self,
        provider: Provider,
        identity: Optional[IdentityProvider] = None,
        port: Optional[SubmissionPort] = None,
        on_success: Optional[Callable[[], Any]] = None,
        broadcaster: Optional[BookingEventBroadcaster] = None,
    ) -> None:
        self._provider = provider
        self._identity = identity
        self._port = port
        self._on_success = on_success
        self._broadcaster = broadcaster

        self._draft = BookingDraft()
        self._state = SubmissionState.idle()

    # ── Public API ────────────────────────────────────────────

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state.status == SubmissionStatus.SUBMITTING

    def snapshot(self) -> BookingDraft:
        """Copy of the current draft. Editing it does not affect the controller."""
        return self._draft.model_copy(deep=True)

    def attach_broadcaster(self, broadcaster: BookingEventBroadcaster) -> None:
        self._broadcaster = broadcaster

    def offered_days(self, reference: datetime | None = None) -> list[DaySlot]:
        """Days the form offers, counted from ``reference`` (default: now)."""
        return generate_days(settings.booking_days_ahead, reference)

    @property
    def offered_times(self) -> tuple[str, ...]:
        return TIME_SLOTS

    # ── Mutators ──────────────────────────────────────────────
    # Each touches one draft field and leaves the submission state alone.

    def set_date(self, value: str) -> None:
        """Pick a day (``YYYY-MM-DD``). An empty string clears the selection."""
        if value:
            date.fromisoformat(value)  # raises ValueError on anything else
        self._draft.date = value
        self._field_changed("date", value)

    def set_time(self, value: str) -> None:
        self._draft.time = value
        self._field_changed("time", value)

    def set_mode(self, value: ConsultationMode | str) -> None:
        """Switch consultation mode. The typed address is kept either way."""
        mode = ConsultationMode(value)
        self._draft.mode = mode
        self._field_changed("mode", mode.value)

    def set_address_field(self, field: str, value: str) -> None:
        if field not in ADDRESS_FIELDS:
            raise ValueError(f"Unknown address field: {field!r}")
        if field == "state":
            value = value.upper()[:2]  # two-letter UF
        setattr(self._draft.address, field, value)
        self._field_changed(f"address.{field}", value)

    def set_notes(self, value: str) -> None:
        self._draft.notes = value
        self._field_changed("notes", value)

    # ── Validation ────────────────────────────────────────────

    def can_submit(self) -> bool:
        return validation.is_submittable(self._draft)

    def missing_fields(self) -> list[str]:
        return validation.missing_fields(self._draft)

    # ── Submission ────────────────────────────────────────────

    async def submit(self, patient: Optional[Patient] = None) -> SubmissionState:
        """Validate, build the request and send it to the submission port.

        ``patient`` overrides the identity provider lookup. Returns the
        terminal state of this attempt (``SUCCEEDED`` or ``FAILED``).

        Raises:
            SubmissionInFlightError: if a previous attempt is still
                ``SUBMITTING``. That attempt is not affected.
        """
        if self.is_submitting:
            log.warning("Submit rejected for provider %s: attempt already in flight",
                        self._provider.id)
            self._emit(events.SUBMISSION_REJECTED, {})
            raise SubmissionInFlightError()

        try:
            details = validation.consultation_details(self._draft)
            patient = patient or self._current_patient()

            self._set_state(SubmissionState.submitting())
            request = build_request(self._draft, details, patient, self._provider)
            self._emit(events.SUBMISSION_STARTED, {
                "date": request.date,
                "time": request.time,
                "mode": request.mode.value,
            })
            log.info(
                "Submitting booking: provider=%s patient=%s %s %s (%s)",
                self._provider.id, redact_pii(patient.id),
                request.date, request.time, request.mode.value,
            )
            await self._dispatch(request)
        except BookingError as exc:
            self._fail(str(exc))
            return self._state
        except BaseException:
            # Cancellation or any other escape must not leave the form stuck
            if self.is_submitting:
                self._fail(UNEXPECTED_FALLBACK)
            raise

        self._set_state(SubmissionState.succeeded())
        self._emit(events.SUBMISSION_SUCCEEDED, {})
        log.info("Booking confirmed for provider %s", self._provider.id)
        if self._on_success is not None:
            self._on_success()
        return self._state

    # ── Read projections ──────────────────────────────────────

    def summary(self) -> BookingSummary | None:
        """Summary card data, or None until both date and time are picked."""
        if not self._draft.date or not self._draft.time:
            return None
        icon, label = _MODE_DISPLAY[self._draft.mode]
        return BookingSummary(
            date_label=f"{format_long_date(self._draft.date)} às {self._draft.time}",
            mode_icon=icon,
            mode_label=label,
            price_label=format_price(self._provider.price),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize form state for a presentation layer."""
        summary = self.summary()
        return {
            "provider": self._provider.model_dump(),
            "draft": self._draft.model_dump(mode="json"),
            "can_submit": self.can_submit(),
            "missing_fields": self.missing_fields(),
            "submission": self._state.to_dict(),
            "summary": asdict(summary) if summary else None,
        }

    # ── Internal ──────────────────────────────────────────────

    def _current_patient(self) -> Patient:
        patient = self._identity.get_current_user() if self._identity else None
        if patient is None:
            raise IdentityError()
        return patient

    async def _dispatch(self, request: BookingRequest) -> None:
        """Send one request. Any non-success outcome becomes SubmissionError."""
        if self._port is None:
            raise SubmissionError("no scheduling service configured")
        try:
            result = await self._port.book_consultation(request)
        except Exception as exc:
            log.exception("Submission port failed for provider %s", self._provider.id)
            raise SubmissionError(UNEXPECTED_FALLBACK) from exc

        if not result.success:
            raise SubmissionError(result.error or REJECTED_FALLBACK)

    def _fail(self, reason: str) -> None:
        self._set_state(SubmissionState.failed(reason))
        self._emit(events.SUBMISSION_FAILED, {"reason": reason})
        log.warning("Booking failed for provider %s: %s", self._provider.id, reason)

    def _set_state(self, state: SubmissionState) -> None:
        previous = self._state.status
        self._state = state
        if previous != state.status:
            log.debug("Submission state: %s → %s", previous.value, state.status.value)

    def _field_changed(self, field: str, value: str) -> None:
        self._emit(events.FIELD_CHANGED, {"field": field, "value": value})

    def _emit(self, event_type: str, data: dict) -> None:
        if self._broadcaster:
            self._broadcaster.emit(event_type, self._state.status.value, data)
