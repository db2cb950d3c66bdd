"""Essential dignity tables: exaltations, falls, detriments, triplicities, terms and faces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from .planets import CHALDEAN_ORDER, Element, Planet
from .zodiac import SIGN_ORDER, ZODIAC_DATA, ZodiacSign, validate_degree

__all__ = [
    "Exaltation",
    "TriplicityRulers",
    "DignitySpan",
    "EXALTATIONS",
    "FALLS",
    "DETRIMENTS",
    "TRIPLICITY_RULERS",
    "EGYPTIAN_TERMS",
    "DECAN_RULERS",
    "term_ruler",
    "term_span",
    "decan_index",
    "decan_ruler",
    "triplicity_rulers",
]


@dataclass(frozen=True)
class Exaltation:
    sign: ZodiacSign
    degree: int


@dataclass(frozen=True)
class TriplicityRulers:
    """Dorothean rulers of one element."""

    element: Element
    day: Planet
    night: Planet
    participating: Planet

    def for_sect(self, is_day: bool) -> Planet:
        return self.day if is_day else self.night


@dataclass(frozen=True)
class DignitySpan:
    """Half-open ``[start_deg, end_deg)`` slice of a sign ruled by ``ruler``."""

    ruler: Planet
    start_deg: float
    end_deg: float

    def contains(self, degree: float) -> bool:
        return self.start_deg <= degree < self.end_deg


EXALTATIONS: Mapping[Planet, Exaltation] = {
    Planet.SUN: Exaltation(ZodiacSign.ARIES, 19),
    Planet.MOON: Exaltation(ZodiacSign.TAURUS, 3),
    Planet.MERCURY: Exaltation(ZodiacSign.VIRGO, 15),
    Planet.VENUS: Exaltation(ZodiacSign.PISCES, 27),
    Planet.MARS: Exaltation(ZodiacSign.CAPRICORN, 28),
    Planet.JUPITER: Exaltation(ZodiacSign.CANCER, 15),
    Planet.SATURN: Exaltation(ZodiacSign.LIBRA, 21),
}


FALLS: Mapping[Planet, ZodiacSign] = {
    planet: exaltation.sign.opposite() for planet, exaltation in EXALTATIONS.items()
}


DETRIMENTS: Mapping[Planet, Tuple[ZodiacSign, ...]] = {
    Planet.SUN: (ZodiacSign.AQUARIUS,),
    Planet.MOON: (ZodiacSign.CAPRICORN,),
    Planet.MARS: (ZodiacSign.LIBRA, ZodiacSign.TAURUS),
    Planet.MERCURY: (ZodiacSign.SAGITTARIUS, ZodiacSign.PISCES),
    Planet.JUPITER: (ZodiacSign.GEMINI, ZodiacSign.VIRGO),
    Planet.VENUS: (ZodiacSign.ARIES, ZodiacSign.SCORPIO),
    Planet.SATURN: (ZodiacSign.CANCER, ZodiacSign.LEO),
}


# Single day ruler and single night ruler are scored; the participating
# ruler is carried for display and is only scored when configured.
TRIPLICITY_RULERS: Mapping[Element, TriplicityRulers] = {
    Element.FIRE: TriplicityRulers(Element.FIRE, Planet.SUN, Planet.JUPITER, Planet.SATURN),
    Element.EARTH: TriplicityRulers(Element.EARTH, Planet.VENUS, Planet.MOON, Planet.MARS),
    Element.AIR: TriplicityRulers(Element.AIR, Planet.SATURN, Planet.MERCURY, Planet.JUPITER),
    Element.WATER: TriplicityRulers(Element.WATER, Planet.VENUS, Planet.MARS, Planet.MOON),
}


def _bounds(*segments: tuple[Planet, float, float]) -> Tuple[DignitySpan, ...]:
    return tuple(DignitySpan(ruler, start, end) for ruler, start, end in segments)


_J, _V, _ME, _MA, _S = Planet.JUPITER, Planet.VENUS, Planet.MERCURY, Planet.MARS, Planet.SATURN

EGYPTIAN_TERMS: Mapping[ZodiacSign, Tuple[DignitySpan, ...]] = {
    ZodiacSign.ARIES: _bounds((_J, 0, 6), (_V, 6, 12), (_ME, 12, 20), (_MA, 20, 25), (_S, 25, 30)),
    ZodiacSign.TAURUS: _bounds((_V, 0, 8), (_ME, 8, 14), (_J, 14, 22), (_S, 22, 27), (_MA, 27, 30)),
    ZodiacSign.GEMINI: _bounds((_ME, 0, 6), (_J, 6, 12), (_V, 12, 17), (_MA, 17, 24), (_S, 24, 30)),
    ZodiacSign.CANCER: _bounds((_MA, 0, 7), (_V, 7, 13), (_ME, 13, 19), (_J, 19, 26), (_S, 26, 30)),
    ZodiacSign.LEO: _bounds((_J, 0, 6), (_V, 6, 11), (_S, 11, 18), (_ME, 18, 24), (_MA, 24, 30)),
    ZodiacSign.VIRGO: _bounds((_ME, 0, 7), (_V, 7, 17), (_J, 17, 21), (_MA, 21, 28), (_S, 28, 30)),
    ZodiacSign.LIBRA: _bounds((_S, 0, 6), (_ME, 6, 14), (_J, 14, 21), (_V, 21, 28), (_MA, 28, 30)),
    ZodiacSign.SCORPIO: _bounds((_MA, 0, 7), (_V, 7, 11), (_ME, 11, 19), (_J, 19, 24), (_S, 24, 30)),
    ZodiacSign.SAGITTARIUS: _bounds(
        (_J, 0, 12), (_V, 12, 17), (_ME, 17, 21), (_S, 21, 26), (_MA, 26, 30)
    ),
    ZodiacSign.CAPRICORN: _bounds(
        (_ME, 0, 7), (_J, 7, 14), (_V, 14, 22), (_S, 22, 26), (_MA, 26, 30)
    ),
    ZodiacSign.AQUARIUS: _bounds(
        (_ME, 0, 7), (_V, 7, 13), (_J, 13, 20), (_MA, 20, 25), (_S, 25, 30)
    ),
    ZodiacSign.PISCES: _bounds((_V, 0, 12), (_J, 12, 16), (_ME, 16, 19), (_MA, 19, 28), (_S, 28, 30)),
}


def _chaldean_decans() -> Mapping[ZodiacSign, Tuple[Planet, Planet, Planet]]:
    # Mars rules the first face of Aries; the 36 faces then follow the
    # Chaldean order without a break.
    start = CHALDEAN_ORDER.index(Planet.MARS)
    table: dict[ZodiacSign, Tuple[Planet, Planet, Planet]] = {}
    for sign_idx, sign in enumerate(SIGN_ORDER):
        offset = start + sign_idx * 3
        table[sign] = tuple(  # type: ignore[assignment]
            CHALDEAN_ORDER[(offset + face) % len(CHALDEAN_ORDER)] for face in range(3)
        )
    return table


DECAN_RULERS: Mapping[ZodiacSign, Tuple[Planet, Planet, Planet]] = _chaldean_decans()


def term_span(sign: ZodiacSign | str, degree: float) -> DignitySpan:
    """Return the Egyptian term containing ``degree`` of ``sign``."""

    value = validate_degree(degree)
    for span in EGYPTIAN_TERMS[ZodiacSign.parse(sign)]:
        if span.contains(value):
            return span
    raise AssertionError(f"Egyptian terms for {sign} do not cover {value}")  # pragma: no cover


def term_ruler(sign: ZodiacSign | str, degree: float) -> Planet:
    return term_span(sign, degree).ruler


def decan_index(degree: float) -> int:
    """Return the face index 0, 1 or 2 for ``degree`` within a sign."""

    return min(2, int(validate_degree(degree) // 10))


def decan_ruler(sign: ZodiacSign | str, degree: float) -> Planet:
    return DECAN_RULERS[ZodiacSign.parse(sign)][decan_index(degree)]


def triplicity_rulers(sign: ZodiacSign | str) -> TriplicityRulers:
    return TRIPLICITY_RULERS[ZODIAC_DATA[ZodiacSign.parse(sign)].element]
