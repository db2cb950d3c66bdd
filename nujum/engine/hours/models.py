"""Typed containers used by the planetary hour calculator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Tuple

from ...errors import InputError, InvalidSolarDayError
from ...reference.planets import Element, Planet, PlanetInfo, Weekday, planet_info

__all__ = [
    "GeoLocation",
    "SolarDay",
    "PlanetaryHour",
    "PlanetaryHourTable",
    "HourSnapshot",
    "DayRulerInfo",
]


def _is_aware(moment: datetime) -> bool:
    return moment.tzinfo is not None and moment.tzinfo.utcoffset(moment) is not None


def to_utc(moment: datetime) -> datetime:
    """Return ``moment`` in UTC, rejecting naive instants."""

    if not isinstance(moment, datetime) or not _is_aware(moment):
        raise InputError(
            f"Instant must be a timezone-aware datetime, got {moment!r}",
            context={"moment": str(moment)},
        )
    return moment.astimezone(UTC)


def elapsed(start: datetime, end: datetime) -> timedelta:
    """Real time between two instants, independent of daylight-saving changes."""

    return to_utc(end) - to_utc(start)


def shift(moment: datetime, delta: timedelta) -> datetime:
    """Add real elapsed time to ``moment`` and express the result in its zone."""

    return (to_utc(moment) + delta).astimezone(moment.tzinfo)


@dataclass(frozen=True)
class GeoLocation:
    """Observer location in decimal degrees (east and north positive)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        lat = float(self.latitude)
        lon = float(self.longitude)
        if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
            raise InputError(f"Latitude out of range: {self.latitude!r}")
        if not (math.isfinite(lon) and -180.0 <= lon <= 180.0):
            raise InputError(f"Longitude out of range: {self.longitude!r}")


@dataclass(frozen=True)
class SolarDay:
    """Sunrise, sunset and the following sunrise bounding one planetary day.

    Instants must be timezone-aware and expressed in the observer's civil
    time zone, since the weekday of ``sunrise`` selects the day ruler.
    """

    sunrise: datetime
    sunset: datetime
    next_sunrise: datetime
    location: GeoLocation | None = None

    def __post_init__(self) -> None:
        for name in ("sunrise", "sunset", "next_sunrise"):
            if not _is_aware(getattr(self, name)):
                raise InvalidSolarDayError(f"SolarDay.{name} must be timezone-aware")
        if self.day_duration <= timedelta(0):
            raise InvalidSolarDayError(
                "Sunset must come after sunrise",
                context={"sunrise": self.sunrise.isoformat(), "sunset": self.sunset.isoformat()},
            )
        if self.night_duration <= timedelta(0):
            raise InvalidSolarDayError(
                "Next sunrise must come after sunset",
                context={
                    "sunset": self.sunset.isoformat(),
                    "next_sunrise": self.next_sunrise.isoformat(),
                },
            )

    @property
    def day_duration(self) -> timedelta:
        return elapsed(self.sunrise, self.sunset)

    @property
    def night_duration(self) -> timedelta:
        return elapsed(self.sunset, self.next_sunrise)

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_python(self.sunrise.weekday())

    def contains(self, moment: datetime) -> bool:
        return to_utc(self.sunrise) <= to_utc(moment) < to_utc(self.next_sunrise)

    def is_daytime(self, moment: datetime) -> bool:
        return to_utc(self.sunrise) <= to_utc(moment) < to_utc(self.sunset)


@dataclass(frozen=True)
class PlanetaryHour:
    """One of the 24 unequal hours of a planetary day."""

    planet: Planet
    hour_number: int
    start: datetime
    end: datetime
    is_daytime: bool

    @property
    def info(self) -> PlanetInfo:
        return planet_info(self.planet)

    @property
    def element(self) -> Element:
        return self.info.element

    @property
    def duration(self) -> timedelta:
        return elapsed(self.start, self.end)

    def contains(self, moment: datetime) -> bool:
        return to_utc(self.start) <= to_utc(moment) < to_utc(self.end)

    def remaining(self, moment: datetime) -> timedelta:
        return max(timedelta(0), elapsed(moment, self.end))

    def to_payload(self) -> dict[str, object]:
        return {
            "planet": self.planet.label,
            "hour_number": self.hour_number,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "is_daytime": self.is_daytime,
        }


@dataclass(frozen=True)
class PlanetaryHourTable:
    """The full 24-hour sequence for one solar day."""

    day_ruler: Planet
    solar_day: SolarDay
    hours: Tuple[PlanetaryHour, ...]

    def __len__(self) -> int:
        return len(self.hours)

    def __iter__(self):
        return iter(self.hours)

    def __getitem__(self, hour_number: int) -> PlanetaryHour:
        """Return the hour numbered ``hour_number`` (1..24)."""

        if not 1 <= hour_number <= len(self.hours):
            raise IndexError(f"Hour number must be between 1 and 24, got {hour_number}")
        return self.hours[hour_number - 1]

    @property
    def day_hours(self) -> Tuple[PlanetaryHour, ...]:
        return self.hours[:12]

    @property
    def night_hours(self) -> Tuple[PlanetaryHour, ...]:
        return self.hours[12:]

    def hour_at(self, moment: datetime) -> PlanetaryHour | None:
        for hour in self.hours:
            if hour.contains(moment):
                return hour
        return None


@dataclass(frozen=True)
class HourSnapshot:
    """Current, next and after-next hours relative to a reference instant."""

    now: datetime
    day_ruler: Planet
    current: PlanetaryHour
    next: PlanetaryHour
    after_next: PlanetaryHour
    countdown_seconds: int

    def to_payload(self) -> dict[str, object]:
        return {
            "now": self.now.isoformat(),
            "day_ruler": self.day_ruler.label,
            "current": self.current.to_payload(),
            "next": self.next.to_payload(),
            "after_next": self.after_next.to_payload(),
            "countdown_seconds": self.countdown_seconds,
        }


@dataclass(frozen=True)
class DayRulerInfo:
    weekday: Weekday
    weekday_arabic: str
    planet: Planet
    planet_arabic: str
    element: Element
    element_arabic: str
    element_emoji: str
    element_description: str
    best_for: Tuple[str, ...]
    difficulty: str
