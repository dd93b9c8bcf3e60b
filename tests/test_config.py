"""Tests for Settings.validate_startup."""

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from consultation.config import Settings


class TestValidateStartup:
    def test_defaults_only_warn_about_token(self):
        s = Settings(_env_file=None, scheduling_api_token="")
        warnings = s.validate_startup()
        assert len(warnings) == 1
        assert "SCHEDULING_API_TOKEN" in warnings[0]

    def test_token_set_no_warnings(self):
        s = Settings(_env_file=None, scheduling_api_token="abc")
        assert s.validate_startup() == []

    def test_negative_days_raises(self):
        s = Settings(_env_file=None, booking_days_ahead=-1)
        with pytest.raises(ValueError, match="BOOKING_DAYS_AHEAD"):
            s.validate_startup()

    def test_zero_days_warns(self):
        s = Settings(_env_file=None, booking_days_ahead=0, scheduling_api_token="abc")
        assert any("BOOKING_DAYS_AHEAD" in w for w in s.validate_startup())

    def test_unknown_timezone_raises(self):
        s = Settings(_env_file=None, booking_timezone="Mars/Olympus_Mons")
        with pytest.raises(ValueError, match="BOOKING_TIMEZONE"):
            s.validate_startup()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BOOKING_DAYS_AHEAD", "14")
        assert Settings(_env_file=None).booking_days_ahead == 14
