"""Unequal (seasonal) planetary hours."""

from __future__ import annotations

from .calculator import (
    HOURS_PER_DAY,
    current_hour,
    day_ruler,
    day_ruler_info,
    hour_ruler,
    hour_snapshot,
    next_hour,
    planetary_hours,
)
from .formatting import format_countdown, format_countdown_short
from .models import (
    DayRulerInfo,
    GeoLocation,
    HourSnapshot,
    PlanetaryHour,
    PlanetaryHourTable,
    SolarDay,
)

__all__ = [
    "HOURS_PER_DAY",
    "DayRulerInfo",
    "GeoLocation",
    "HourSnapshot",
    "PlanetaryHour",
    "PlanetaryHourTable",
    "SolarDay",
    "current_hour",
    "day_ruler",
    "day_ruler_info",
    "format_countdown",
    "format_countdown_short",
    "hour_ruler",
    "hour_snapshot",
    "next_hour",
    "planetary_hours",
]
