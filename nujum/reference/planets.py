"""Classical planets, elements and the weekly planetary-day correspondences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping, Tuple

from ..errors import UnknownValueError

__all__ = [
    "LookupEnum",
    "Planet",
    "Element",
    "Modality",
    "Weekday",
    "PlanetInfo",
    "ElementInfo",
    "PlanetaryDay",
    "CHALDEAN_ORDER",
    "PLANET_INFO",
    "ELEMENT_INFO",
    "PLANETARY_DAYS",
    "DAY_RULERS",
    "chaldean_successor",
    "planet_info",
]


class LookupEnum(StrEnum):
    """String enum that resolves case-insensitive names and fails loudly otherwise."""

    @classmethod
    def parse(cls, value: object):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise UnknownValueError(
            f"Unknown {cls.__name__} '{value}'",
            context={"type": cls.__name__, "value": value},
        )

    @property
    def label(self) -> str:
        return self.value.title()


class Planet(LookupEnum):
    """The seven classical planets."""

    SATURN = "saturn"
    JUPITER = "jupiter"
    MARS = "mars"
    SUN = "sun"
    VENUS = "venus"
    MERCURY = "mercury"
    MOON = "moon"


class Element(LookupEnum):
    FIRE = "fire"
    EARTH = "earth"
    AIR = "air"
    WATER = "water"


class Modality(LookupEnum):
    CARDINAL = "cardinal"
    FIXED = "fixed"
    MUTABLE = "mutable"


class Weekday(LookupEnum):
    """Civil weekdays, Sunday first as in the planetary-day table."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def from_python(cls, weekday: int) -> Weekday:
        """Map :meth:`datetime.weekday` (Monday == 0) onto the enum."""

        names = (
            cls.MONDAY,
            cls.TUESDAY,
            cls.WEDNESDAY,
            cls.THURSDAY,
            cls.FRIDAY,
            cls.SATURDAY,
            cls.SUNDAY,
        )
        return names[weekday % 7]


@dataclass(frozen=True)
class PlanetInfo:
    """Display metadata and home element for a planet."""

    planet: Planet
    symbol: str
    arabic_name: str
    element: Element

    def to_payload(self) -> dict[str, object]:
        return {
            "planet": self.planet.label,
            "symbol": self.symbol,
            "arabic_name": self.arabic_name,
            "element": self.element.value,
        }


@dataclass(frozen=True)
class ElementInfo:
    element: Element
    arabic_name: str
    emoji: str
    description: str
    best_for: Tuple[str, ...]


@dataclass(frozen=True)
class PlanetaryDay:
    """Weekday with its ruling planet and Arabic day name."""

    weekday: Weekday
    ruler: Planet
    arabic_name: str


# Slowest to fastest; drives both the hour rotation and the decan rulers.
CHALDEAN_ORDER: Tuple[Planet, ...] = (
    Planet.SATURN,
    Planet.JUPITER,
    Planet.MARS,
    Planet.SUN,
    Planet.VENUS,
    Planet.MERCURY,
    Planet.MOON,
)


PLANET_INFO: Mapping[Planet, PlanetInfo] = {
    Planet.SUN: PlanetInfo(Planet.SUN, "☉", "الشمس", Element.FIRE),
    Planet.MOON: PlanetInfo(Planet.MOON, "☽", "القمر", Element.WATER),
    Planet.MARS: PlanetInfo(Planet.MARS, "♂", "المريخ", Element.FIRE),
    Planet.MERCURY: PlanetInfo(Planet.MERCURY, "☿", "عطارد", Element.AIR),
    Planet.JUPITER: PlanetInfo(Planet.JUPITER, "♃", "المشتري", Element.AIR),
    Planet.VENUS: PlanetInfo(Planet.VENUS, "♀", "الزهرة", Element.WATER),
    Planet.SATURN: PlanetInfo(Planet.SATURN, "♄", "زحل", Element.EARTH),
}


ELEMENT_INFO: Mapping[Element, ElementInfo] = {
    Element.FIRE: ElementInfo(
        Element.FIRE,
        "نار",
        "🔥",
        "Passionate & energizing",
        ("Leadership", "Starting projects", "Physical activities", "Bold decisions"),
    ),
    Element.WATER: ElementInfo(
        Element.WATER,
        "ماء",
        "💧",
        "Flowing & emotional",
        ("Emotional healing", "Relationships", "Intuitive work", "Creative flow"),
    ),
    Element.AIR: ElementInfo(
        Element.AIR,
        "هواء",
        "💨",
        "Intellectual & communicative",
        ("Learning", "Communication", "Planning", "Social connections"),
    ),
    Element.EARTH: ElementInfo(
        Element.EARTH,
        "تراب",
        "🌿",
        "Grounded & stable",
        ("Building foundations", "Practical tasks", "Financial matters", "Physical health"),
    ),
}


PLANETARY_DAYS: Tuple[PlanetaryDay, ...] = (
    PlanetaryDay(Weekday.SUNDAY, Planet.SUN, "الأحد"),
    PlanetaryDay(Weekday.MONDAY, Planet.MOON, "الإثنين"),
    PlanetaryDay(Weekday.TUESDAY, Planet.MARS, "الثلاثاء"),
    PlanetaryDay(Weekday.WEDNESDAY, Planet.MERCURY, "الأربعاء"),
    PlanetaryDay(Weekday.THURSDAY, Planet.JUPITER, "الخميس"),
    PlanetaryDay(Weekday.FRIDAY, Planet.VENUS, "الجمعة"),
    PlanetaryDay(Weekday.SATURDAY, Planet.SATURN, "السبت"),
)


DAY_RULERS: Mapping[Weekday, Planet] = {day.weekday: day.ruler for day in PLANETARY_DAYS}


def chaldean_successor(planet: Planet, steps: int = 1) -> Planet:
    """Return the planet ``steps`` places after ``planet`` in the Chaldean rotation."""

    start = CHALDEAN_ORDER.index(Planet.parse(planet))
    return CHALDEAN_ORDER[(start + steps) % len(CHALDEAN_ORDER)]


def planet_info(planet: Planet | str) -> PlanetInfo:
    return PLANET_INFO[Planet.parse(planet)]
