"""Zodiac signs with their elements, modalities and domicile rulers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Tuple

from ..errors import DegreeOutOfRangeError
from .planets import Element, LookupEnum, Modality, Planet

__all__ = [
    "ZodiacSign",
    "SignInfo",
    "SIGN_ORDER",
    "ZODIAC_DATA",
    "PLANET_RULERSHIPS",
    "SIGN_RULERS",
    "sign_info",
    "sign_from_longitude",
    "degree_in_sign",
    "validate_degree",
]


class ZodiacSign(LookupEnum):
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"

    @property
    def ordinal(self) -> int:
        return SIGN_ORDER.index(self)

    def opposite(self) -> ZodiacSign:
        return SIGN_ORDER[(self.ordinal + 6) % 12]


SIGN_ORDER: Tuple[ZodiacSign, ...] = tuple(ZodiacSign)


@dataclass(frozen=True)
class SignInfo:
    sign: ZodiacSign
    element: Element
    modality: Modality
    symbol: str
    arabic_name: str


ZODIAC_DATA: Mapping[ZodiacSign, SignInfo] = {
    ZodiacSign.ARIES: SignInfo(ZodiacSign.ARIES, Element.FIRE, Modality.CARDINAL, "♈", "الحمل"),
    ZodiacSign.TAURUS: SignInfo(ZodiacSign.TAURUS, Element.EARTH, Modality.FIXED, "♉", "الثور"),
    ZodiacSign.GEMINI: SignInfo(ZodiacSign.GEMINI, Element.AIR, Modality.MUTABLE, "♊", "الجوزاء"),
    ZodiacSign.CANCER: SignInfo(ZodiacSign.CANCER, Element.WATER, Modality.CARDINAL, "♋", "السرطان"),
    ZodiacSign.LEO: SignInfo(ZodiacSign.LEO, Element.FIRE, Modality.FIXED, "♌", "الأسد"),
    ZodiacSign.VIRGO: SignInfo(ZodiacSign.VIRGO, Element.EARTH, Modality.MUTABLE, "♍", "العذراء"),
    ZodiacSign.LIBRA: SignInfo(ZodiacSign.LIBRA, Element.AIR, Modality.CARDINAL, "♎", "الميزان"),
    ZodiacSign.SCORPIO: SignInfo(ZodiacSign.SCORPIO, Element.WATER, Modality.FIXED, "♏", "العقرب"),
    ZodiacSign.SAGITTARIUS: SignInfo(
        ZodiacSign.SAGITTARIUS, Element.FIRE, Modality.MUTABLE, "♐", "القوس"
    ),
    ZodiacSign.CAPRICORN: SignInfo(
        ZodiacSign.CAPRICORN, Element.EARTH, Modality.CARDINAL, "♑", "الجدي"
    ),
    ZodiacSign.AQUARIUS: SignInfo(ZodiacSign.AQUARIUS, Element.AIR, Modality.FIXED, "♒", "الدلو"),
    ZodiacSign.PISCES: SignInfo(ZodiacSign.PISCES, Element.WATER, Modality.MUTABLE, "♓", "الحوت"),
}


# First entry is the primary domicile used for display.
PLANET_RULERSHIPS: Mapping[Planet, Tuple[ZodiacSign, ...]] = {
    Planet.SUN: (ZodiacSign.LEO,),
    Planet.MOON: (ZodiacSign.CANCER,),
    Planet.MARS: (ZodiacSign.ARIES, ZodiacSign.SCORPIO),
    Planet.MERCURY: (ZodiacSign.GEMINI, ZodiacSign.VIRGO),
    Planet.JUPITER: (ZodiacSign.SAGITTARIUS, ZodiacSign.PISCES),
    Planet.VENUS: (ZodiacSign.TAURUS, ZodiacSign.LIBRA),
    Planet.SATURN: (ZodiacSign.CAPRICORN, ZodiacSign.AQUARIUS),
}


SIGN_RULERS: Mapping[ZodiacSign, Planet] = {
    sign: planet for planet, signs in PLANET_RULERSHIPS.items() for sign in signs
}


def sign_info(sign: ZodiacSign | str) -> SignInfo:
    return ZODIAC_DATA[ZodiacSign.parse(sign)]


def sign_from_longitude(longitude: float) -> ZodiacSign:
    idx = int((float(longitude) % 360.0) // 30.0)
    return SIGN_ORDER[idx]


def degree_in_sign(longitude: float) -> float:
    return float(longitude) % 30.0


def validate_degree(degree: float) -> float:
    """Return ``degree`` as a float, rejecting anything outside ``[0, 30)``.

    Values are never wrapped: 30.0 belongs to the next sign and a negative
    degree belongs to the previous one, so both are the caller's error.
    """

    if isinstance(degree, bool):
        raise DegreeOutOfRangeError(
            f"Degree must be a number, got {degree!r}", context={"degree": degree}
        )
    try:
        value = float(degree)
    except (TypeError, ValueError) as exc:
        raise DegreeOutOfRangeError(
            f"Degree must be a number, got {degree!r}", context={"degree": degree}
        ) from exc
    if not math.isfinite(value) or not 0.0 <= value < 30.0:
        raise DegreeOutOfRangeError(
            f"Degree within sign must be in [0, 30), got {degree!r}",
            context={"degree": degree},
        )
    return value
