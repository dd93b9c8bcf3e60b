"""Application configuration via environment variables."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings

log = logging.getLogger("consultation.config")


class Settings(BaseSettings):
    # Remote scheduling service
    scheduling_api_url: str = "http://localhost:3001/api"
    scheduling_api_timeout: float = 15.0
    scheduling_api_token: str = ""

    # Booking form
    booking_days_ahead: int = 9
    booking_timezone: str = "America/Sao_Paulo"
    currency_symbol: str = "R$"

    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def validate_startup(self) -> list[str]:
        """Validate configuration at startup. Returns warnings, raises on errors."""
        warnings: list[str] = []

        if self.booking_days_ahead < 0:
            raise ValueError(
                f"BOOKING_DAYS_AHEAD must be >= 0, got {self.booking_days_ahead}."
            )

        try:
            ZoneInfo(self.booking_timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(
                f"BOOKING_TIMEZONE {self.booking_timezone!r} is not a known timezone."
            ) from exc

        if self.booking_days_ahead == 0:
            warnings.append("BOOKING_DAYS_AHEAD is 0. No days will be offered.")

        if not self.scheduling_api_token:
            warnings.append(
                "SCHEDULING_API_TOKEN not set. Requests to the scheduling "
                "service will be sent without an Authorization header."
            )

        for w in warnings:
            log.warning(w)
        return warnings


settings = Settings()
