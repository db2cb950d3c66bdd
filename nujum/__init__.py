"""Planetary hours, essential dignities and element alignment."""

from __future__ import annotations

from .alignment import (
    Alignment,
    AlignmentStatus,
    Badge,
    BadgeTier,
    alignment_for_hour,
    score_alignment,
)
from .config import Settings, default_settings, load_settings
from .engine.dignity import (
    ConditionTier,
    DetailedCondition,
    DignityEntry,
    DignityResult,
    DignityType,
    EclipticPosition,
    evaluate_dignities,
    evaluate_position,
    primary_entry,
    simplified_status,
)
from .engine.hours import (
    GeoLocation,
    HourSnapshot,
    PlanetaryHour,
    PlanetaryHourTable,
    SolarDay,
    current_hour,
    day_ruler,
    hour_snapshot,
    next_hour,
    planetary_hours,
)
from .errors import (
    DegreeOutOfRangeError,
    InputError,
    InvalidSolarDayError,
    NujumError,
    OutsideSolarDayError,
    UnknownValueError,
)
from .reference import CHALDEAN_ORDER, Element, Modality, Planet, ZodiacSign

__version__ = "0.1.0"

__all__ = [
    "CHALDEAN_ORDER",
    "Alignment",
    "AlignmentStatus",
    "Badge",
    "BadgeTier",
    "ConditionTier",
    "DegreeOutOfRangeError",
    "DetailedCondition",
    "DignityEntry",
    "DignityResult",
    "DignityType",
    "EclipticPosition",
    "Element",
    "GeoLocation",
    "HourSnapshot",
    "InputError",
    "InvalidSolarDayError",
    "Modality",
    "NujumError",
    "OutsideSolarDayError",
    "Planet",
    "PlanetaryHour",
    "PlanetaryHourTable",
    "Settings",
    "SolarDay",
    "UnknownValueError",
    "ZodiacSign",
    "alignment_for_hour",
    "current_hour",
    "day_ruler",
    "default_settings",
    "evaluate_dignities",
    "evaluate_position",
    "hour_snapshot",
    "load_settings",
    "next_hour",
    "planetary_hours",
    "primary_entry",
    "score_alignment",
    "simplified_status",
]
