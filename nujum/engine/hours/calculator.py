"""Planetary hour computation over externally supplied sunrise/sunset instants."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from ...errors import InvalidSolarDayError, OutsideSolarDayError
from ...reference.planets import (
    CHALDEAN_ORDER,
    DAY_RULERS,
    ELEMENT_INFO,
    PLANETARY_DAYS,
    Element,
    Planet,
    Weekday,
    chaldean_successor,
    planet_info,
)
from .models import (
    DayRulerInfo,
    HourSnapshot,
    PlanetaryHour,
    PlanetaryHourTable,
    SolarDay,
    elapsed,
    shift,
    to_utc,
)

LOG = logging.getLogger(__name__)

__all__ = [
    "HOURS_PER_DAY",
    "day_ruler",
    "day_ruler_info",
    "hour_ruler",
    "planetary_hours",
    "current_hour",
    "next_hour",
    "hour_snapshot",
]

HOURS_PER_DAY = 24
_HALF = HOURS_PER_DAY // 2

_DIFFICULTY = {
    Element.FIRE: "Moderate",
    Element.AIR: "Moderate",
    Element.WATER: "Easy",
    Element.EARTH: "Advanced",
}


def day_ruler(moment: datetime) -> Planet:
    """Return the planet ruling the civil weekday of ``moment``."""

    return DAY_RULERS[Weekday.from_python(moment.weekday())]


def day_ruler_info(moment: datetime) -> DayRulerInfo:
    weekday = Weekday.from_python(moment.weekday())
    day = next(entry for entry in PLANETARY_DAYS if entry.weekday == weekday)
    info = planet_info(day.ruler)
    element = ELEMENT_INFO[info.element]
    return DayRulerInfo(
        weekday=weekday,
        weekday_arabic=day.arabic_name,
        planet=day.ruler,
        planet_arabic=info.arabic_name,
        element=info.element,
        element_arabic=element.arabic_name,
        element_emoji=element.emoji,
        element_description=element.description,
        best_for=element.best_for,
        difficulty=_DIFFICULTY[info.element],
    )


def hour_ruler(ruler_of_day: Planet, hour_number: int) -> Planet:
    """Return the ruler of hour ``hour_number`` (1-based) of a day ruled by ``ruler_of_day``."""

    if hour_number < 1:
        raise ValueError(f"Hour number must be positive, got {hour_number}")
    start = CHALDEAN_ORDER.index(Planet.parse(ruler_of_day))
    return CHALDEAN_ORDER[(start + hour_number - 1) % len(CHALDEAN_ORDER)]


def _boundaries(start: datetime, span: timedelta) -> list[datetime]:
    # Offsets are real elapsed time; k * span / 12 keeps the last boundary
    # exactly on ``start + span``.
    return [shift(start, span * k / _HALF) for k in range(_HALF + 1)]


def planetary_hours(solar_day: SolarDay) -> PlanetaryHourTable:
    """Split ``solar_day`` into 12 day and 12 night hours with their rulers."""

    if not isinstance(solar_day, SolarDay):
        raise InvalidSolarDayError(f"Expected SolarDay, got {type(solar_day).__name__}")
    ruler = day_ruler(solar_day.sunrise)
    day_edges = _boundaries(solar_day.sunrise, solar_day.day_duration)
    night_edges = _boundaries(solar_day.sunset, solar_day.night_duration)

    hours: list[PlanetaryHour] = []
    for number in range(1, HOURS_PER_DAY + 1):
        daytime = number <= _HALF
        edges = day_edges if daytime else night_edges
        slot = (number - 1) % _HALF
        hours.append(
            PlanetaryHour(
                planet=hour_ruler(ruler, number),
                hour_number=number,
                start=edges[slot],
                end=edges[slot + 1],
                is_daytime=daytime,
            )
        )

    LOG.debug(
        "Planetary hours for %s: day ruler %s, day hour %s, night hour %s",
        solar_day.sunrise.date().isoformat(),
        ruler.label,
        solar_day.day_duration / _HALF,
        solar_day.night_duration / _HALF,
    )
    return PlanetaryHourTable(day_ruler=ruler, solar_day=solar_day, hours=tuple(hours))


def _table(source: SolarDay | PlanetaryHourTable) -> PlanetaryHourTable:
    if isinstance(source, PlanetaryHourTable):
        return source
    return planetary_hours(source)


def current_hour(now: datetime, source: SolarDay | PlanetaryHourTable) -> PlanetaryHour:
    """Return the hour whose ``[start, end)`` interval contains ``now``.

    Raises :class:`OutsideSolarDayError` when ``now`` lies before sunrise or
    at/after the next sunrise; the caller must then supply the adjacent day.
    A naive ``now`` raises :class:`InputError`.
    """

    to_utc(now)  # rejects naive instants
    table = _table(source)
    hour = table.hour_at(now)
    if hour is None:
        raise OutsideSolarDayError(
            "Moment is outside the supplied solar day",
            context={
                "now": now.isoformat(),
                "sunrise": table.solar_day.sunrise.isoformat(),
                "next_sunrise": table.solar_day.next_sunrise.isoformat(),
            },
        )
    return hour


def _following(table: PlanetaryHourTable, hour: PlanetaryHour) -> PlanetaryHour:
    if hour.hour_number < HOURS_PER_DAY:
        return table[hour.hour_number + 1]
    # First hour of the next planetary day. Its end needs the next sunset,
    # which is not part of this solar day, so today's day-hour length is used.
    start = table.solar_day.next_sunrise
    return PlanetaryHour(
        planet=chaldean_successor(hour.planet),
        hour_number=1,
        start=start,
        end=shift(start, table.solar_day.day_duration / _HALF),
        is_daytime=True,
    )


def next_hour(now: datetime, source: SolarDay | PlanetaryHourTable) -> PlanetaryHour:
    table = _table(source)
    return _following(table, current_hour(now, table))


def hour_snapshot(now: datetime, source: SolarDay | PlanetaryHourTable) -> HourSnapshot:
    """Return the current, next and after-next hours with a countdown in whole seconds."""

    table = _table(source)
    current = current_hour(now, table)
    upcoming = _following(table, current)
    if upcoming.hour_number == 1:
        after = PlanetaryHour(
            planet=chaldean_successor(upcoming.planet),
            hour_number=2,
            start=upcoming.end,
            end=shift(upcoming.end, upcoming.duration),
            is_daytime=True,
        )
    else:
        after = _following(table, upcoming)
    countdown = max(0, math.floor(elapsed(now, current.end).total_seconds()))
    return HourSnapshot(
        now=now,
        day_ruler=table.day_ruler,
        current=current,
        next=upcoming,
        after_next=after,
        countdown_seconds=countdown,
    )
