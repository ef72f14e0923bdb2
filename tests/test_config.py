"""Tests for settings and day keys."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from swell.config import Settings
from swell.utils.day_key import day_for, today_id


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.DAY_TIMEZONE == "UTC"
    assert settings.SCORING_URL.endswith("/score-mission")
    assert settings.AI_PROVIDER == "openai"


def test_cors_origins_from_comma_list():
    settings = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test")

    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_from_json():
    settings = Settings(_env_file=None, CORS_ORIGINS='["http://a.test"]')

    assert settings.CORS_ORIGINS == ["http://a.test"]


def test_unknown_timezone_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, DAY_TIMEZONE="Mars/Olympus_Mons")


def test_day_for_uses_zone():
    late_utc = datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc)

    assert day_for(late_utc, ZoneInfo("UTC")) == date(2026, 10, 19)
    assert day_for(late_utc, ZoneInfo("Asia/Tokyo")) == date(2026, 10, 20)
    assert day_for(late_utc, ZoneInfo("America/Los_Angeles")) == date(2026, 10, 19)


def test_day_for_naive_is_utc():
    assert day_for(datetime(2026, 10, 19, 23, 59), ZoneInfo("UTC")) == date(2026, 10, 19)


def test_today_id_is_a_date():
    assert isinstance(today_id(), date)
