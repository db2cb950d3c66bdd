"""Static reference tables shared by the hour and dignity calculators."""

from __future__ import annotations

from .dignities import (
    DECAN_RULERS,
    DETRIMENTS,
    EGYPTIAN_TERMS,
    EXALTATIONS,
    FALLS,
    TRIPLICITY_RULERS,
    DignitySpan,
    Exaltation,
    TriplicityRulers,
    decan_index,
    decan_ruler,
    term_ruler,
    term_span,
    triplicity_rulers,
)
from .planets import (
    CHALDEAN_ORDER,
    DAY_RULERS,
    ELEMENT_INFO,
    PLANET_INFO,
    PLANETARY_DAYS,
    Element,
    ElementInfo,
    Modality,
    Planet,
    PlanetaryDay,
    PlanetInfo,
    Weekday,
    chaldean_successor,
    planet_info,
)
from .zodiac import (
    PLANET_RULERSHIPS,
    SIGN_ORDER,
    SIGN_RULERS,
    ZODIAC_DATA,
    SignInfo,
    ZodiacSign,
    degree_in_sign,
    sign_from_longitude,
    sign_info,
    validate_degree,
)

__all__ = [
    "CHALDEAN_ORDER",
    "DAY_RULERS",
    "DECAN_RULERS",
    "DETRIMENTS",
    "EGYPTIAN_TERMS",
    "ELEMENT_INFO",
    "EXALTATIONS",
    "FALLS",
    "PLANET_INFO",
    "PLANET_RULERSHIPS",
    "PLANETARY_DAYS",
    "SIGN_ORDER",
    "SIGN_RULERS",
    "TRIPLICITY_RULERS",
    "ZODIAC_DATA",
    "DignitySpan",
    "Element",
    "ElementInfo",
    "Exaltation",
    "Modality",
    "Planet",
    "PlanetInfo",
    "PlanetaryDay",
    "SignInfo",
    "TriplicityRulers",
    "Weekday",
    "ZodiacSign",
    "chaldean_successor",
    "decan_index",
    "decan_ruler",
    "degree_in_sign",
    "planet_info",
    "sign_from_longitude",
    "sign_info",
    "term_ruler",
    "term_span",
    "triplicity_rulers",
    "validate_degree",
]
