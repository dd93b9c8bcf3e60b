"""HTTP submission port for the remote scheduling service."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from consultation.config import settings
from consultation.models import BookingRequest, BookingResult
from consultation.ports.base import SubmissionPort

log = logging.getLogger("consultation.ports.http_client")

MALFORMED_RESPONSE = "unreadable response from scheduling service"


class HttpSchedulingClient(SubmissionPort):
    """POST booking requests to ``{base_url}/consultations``.

    A 2xx response is read as ``{"success": bool, "error": str | None}``;
    a body without ``success`` counts as accepted, and one whose fields do
    not validate counts as failed. Non-2xx responses are
    turned into a failed ``BookingResult`` carrying the service's message.
    Transport errors (connection refused, timeouts) are raised.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.scheduling_api_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.scheduling_api_timeout
        self._token = token if token is not None else settings.scheduling_api_token
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def book_consultation(self, request: BookingRequest) -> BookingResult:
        url = f"{self._base_url}/consultations"
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport,
        ) as client:
            resp = await client.post(url, json=request.to_wire(), headers=self._headers())
            try:
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                message = self._error_message(exc.response)
                log.warning(
                    "Scheduling service rejected booking (status %d): %s",
                    exc.response.status_code, message,
                )
                return BookingResult(success=False, error=message)

        data = self._json_body(resp)
        try:
            result = BookingResult.model_validate({"success": True, **data})
        except ValidationError:
            log.warning("Unreadable booking response from scheduling service: %r", data)
            return BookingResult(success=False, error=MALFORMED_RESPONSE)
        log.info("Scheduling service answered success=%s", result.success)
        return result

    @staticmethod
    def _json_body(resp: httpx.Response) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @classmethod
    def _error_message(cls, resp: httpx.Response) -> str:
        data = cls._json_body(resp)
        message = data.get("error") or data.get("message")
        if message:
            return str(message)
        return f"{resp.status_code} {resp.reason_phrase}".strip()
