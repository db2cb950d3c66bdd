"""Shared fixtures for the nujum test-suite."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from nujum.config import default_settings
from nujum.engine.hours import GeoLocation, SolarDay
from nujum.providers import SunTimes

RIYADH = timezone(timedelta(hours=3), "AST")


@pytest.fixture
def location() -> GeoLocation:
    return GeoLocation(latitude=24.7136, longitude=46.6753)


@pytest.fixture
def solar_day(location: GeoLocation) -> SolarDay:
    """Wednesday 20 March 2024: 61-minute day hours and 58m50s night hours."""

    return SolarDay(
        sunrise=datetime(2024, 3, 20, 6, 0, tzinfo=RIYADH),
        sunset=datetime(2024, 3, 20, 18, 12, tzinfo=RIYADH),
        next_sunrise=datetime(2024, 3, 21, 5, 58, tzinfo=RIYADH),
        location=location,
    )


class FixedSolarProvider:
    """Solar provider returning the same clock times every day."""

    provider_id = "fixed"

    def __init__(self, sunrise=(6, 0), sunset=(18, 0), tz=RIYADH) -> None:
        self.sunrise = sunrise
        self.sunset = sunset
        self.tz = tz
        self.calls: list[date] = []

    def sun_times(self, day: date, location: GeoLocation) -> SunTimes:
        self.calls.append(day)
        return SunTimes(
            sunrise=datetime(day.year, day.month, day.day, *self.sunrise, tzinfo=self.tz),
            sunset=datetime(day.year, day.month, day.day, *self.sunset, tzinfo=self.tz),
        )


@pytest.fixture
def solar_provider() -> FixedSolarProvider:
    return FixedSolarProvider()


@pytest.fixture
def settings():
    return default_settings()
