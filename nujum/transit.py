"""Presentation summary of the planet ruling the current hour."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .engine.hours.models import HourSnapshot
from .reference.planets import Element, Planet
from .reference.zodiac import PLANET_RULERSHIPS, ZODIAC_DATA, ZodiacSign

__all__ = ["HourTransit", "primary_sign", "hour_transit"]


@dataclass(frozen=True)
class HourTransit:
    planet: Planet
    planet_arabic: str
    planet_symbol: str
    element: Element
    sign: ZodiacSign
    sign_symbol: str
    hour_number: int
    is_daytime: bool
    updated_at: datetime
    next_hour_start: datetime
    countdown_seconds: int

    def to_payload(self) -> dict[str, object]:
        return {
            "planet_key": self.planet.value,
            "planet_name": self.planet.label,
            "planet_name_ar": self.planet_arabic,
            "planet_symbol": self.planet_symbol,
            "element": self.element.value,
            "zodiac": self.sign.value,
            "zodiac_symbol": self.sign_symbol,
            "hour_number": self.hour_number,
            "is_daytime": self.is_daytime,
            "updated_at": self.updated_at.isoformat(),
            "next_hour_start": self.next_hour_start.isoformat(),
            "countdown_seconds": self.countdown_seconds,
        }


def primary_sign(planet: Planet | str) -> ZodiacSign:
    """Return the first domicile listed for ``planet``."""

    return PLANET_RULERSHIPS[Planet.parse(planet)][0]


def hour_transit(snapshot: HourSnapshot) -> HourTransit:
    current = snapshot.current
    info = current.info
    sign = primary_sign(current.planet)
    return HourTransit(
        planet=current.planet,
        planet_arabic=info.arabic_name,
        planet_symbol=info.symbol,
        element=info.element,
        sign=sign,
        sign_symbol=ZODIAC_DATA[sign].symbol,
        hour_number=current.hour_number,
        is_daytime=current.is_daytime,
        updated_at=snapshot.now,
        next_hour_start=snapshot.next.start,
        countdown_seconds=snapshot.countdown_seconds,
    )
