from __future__ import annotations

import pytest

from nujum.errors import DegreeOutOfRangeError, UnknownValueError
from nujum.reference import (
    CHALDEAN_ORDER,
    DAY_RULERS,
    DECAN_RULERS,
    DETRIMENTS,
    EGYPTIAN_TERMS,
    EXALTATIONS,
    FALLS,
    PLANET_INFO,
    PLANET_RULERSHIPS,
    SIGN_ORDER,
    TRIPLICITY_RULERS,
    ZODIAC_DATA,
    Element,
    Modality,
    Planet,
    Weekday,
    ZodiacSign,
    chaldean_successor,
    decan_index,
    decan_ruler,
    sign_from_longitude,
    term_ruler,
    validate_degree,
)


def test_chaldean_order_and_weekday_rulers():
    assert CHALDEAN_ORDER == (
        Planet.SATURN,
        Planet.JUPITER,
        Planet.MARS,
        Planet.SUN,
        Planet.VENUS,
        Planet.MERCURY,
        Planet.MOON,
    )
    assert DAY_RULERS[Weekday.SUNDAY] is Planet.SUN
    assert DAY_RULERS[Weekday.MONDAY] is Planet.MOON
    assert DAY_RULERS[Weekday.TUESDAY] is Planet.MARS
    assert DAY_RULERS[Weekday.WEDNESDAY] is Planet.MERCURY
    assert DAY_RULERS[Weekday.THURSDAY] is Planet.JUPITER
    assert DAY_RULERS[Weekday.FRIDAY] is Planet.VENUS
    assert DAY_RULERS[Weekday.SATURDAY] is Planet.SATURN
    assert chaldean_successor(Planet.MOON) is Planet.SATURN
    assert chaldean_successor(Planet.SATURN, 3) is Planet.SUN


def test_python_weekday_mapping():
    assert Weekday.from_python(0) is Weekday.MONDAY
    assert Weekday.from_python(6) is Weekday.SUNDAY


def test_planet_home_elements():
    assert PLANET_INFO[Planet.SUN].element is Element.FIRE
    assert PLANET_INFO[Planet.MARS].element is Element.FIRE
    assert PLANET_INFO[Planet.MOON].element is Element.WATER
    assert PLANET_INFO[Planet.VENUS].element is Element.WATER
    assert PLANET_INFO[Planet.MERCURY].element is Element.AIR
    assert PLANET_INFO[Planet.JUPITER].element is Element.AIR
    assert PLANET_INFO[Planet.SATURN].element is Element.EARTH


def test_signs_have_three_per_element_and_four_per_modality():
    for element in Element:
        assert sum(1 for info in ZODIAC_DATA.values() if info.element is element) == 3
    for modality in Modality:
        assert sum(1 for info in ZODIAC_DATA.values() if info.modality is modality) == 4
    assert ZODIAC_DATA[ZodiacSign.LEO].element is Element.FIRE
    assert ZODIAC_DATA[ZodiacSign.PISCES].modality is Modality.MUTABLE


def test_falls_and_detriments_oppose_exaltations_and_domiciles():
    for planet, exaltation in EXALTATIONS.items():
        assert FALLS[planet] is exaltation.sign.opposite()
    for planet, signs in PLANET_RULERSHIPS.items():
        assert set(DETRIMENTS[planet]) == {sign.opposite() for sign in signs}
    assert FALLS[Planet.SATURN] is ZodiacSign.ARIES
    assert EXALTATIONS[Planet.SUN].degree == 19


def test_triplicity_table_is_dorothean():
    fire = TRIPLICITY_RULERS[Element.FIRE]
    assert (fire.day, fire.night, fire.participating) == (Planet.SUN, Planet.JUPITER, Planet.SATURN)
    water = TRIPLICITY_RULERS[Element.WATER]
    assert (water.day, water.night, water.participating) == (Planet.VENUS, Planet.MARS, Planet.MOON)
    assert TRIPLICITY_RULERS[Element.AIR].for_sect(False) is Planet.MERCURY
    assert TRIPLICITY_RULERS[Element.EARTH].for_sect(True) is Planet.VENUS


def test_egyptian_terms_cover_each_sign_without_gaps():
    for sign in SIGN_ORDER:
        spans = EGYPTIAN_TERMS[sign]
        assert len(spans) == 5
        assert spans[0].start_deg == 0
        assert spans[-1].end_deg == 30
        for left, right in zip(spans, spans[1:]):
            assert left.end_deg == right.start_deg
        assert len({span.ruler for span in spans}) == 5
        assert Planet.SUN not in {span.ruler for span in spans}
        assert Planet.MOON not in {span.ruler for span in spans}


def test_term_ruler_lookup_uses_half_open_bounds():
    assert term_ruler(ZodiacSign.LEO, 19) is Planet.MERCURY
    assert term_ruler(ZodiacSign.LEO, 17.999) is Planet.SATURN
    assert term_ruler(ZodiacSign.LEO, 18) is Planet.MERCURY
    assert term_ruler("aries", 0) is Planet.JUPITER
    assert term_ruler("Aries", 29.99) is Planet.SATURN


def test_decan_table_matches_classical_faces():
    expected = {
        ZodiacSign.ARIES: (Planet.MARS, Planet.SUN, Planet.VENUS),
        ZodiacSign.TAURUS: (Planet.MERCURY, Planet.MOON, Planet.SATURN),
        ZodiacSign.GEMINI: (Planet.JUPITER, Planet.MARS, Planet.SUN),
        ZodiacSign.CANCER: (Planet.VENUS, Planet.MERCURY, Planet.MOON),
        ZodiacSign.LEO: (Planet.SATURN, Planet.JUPITER, Planet.MARS),
        ZodiacSign.VIRGO: (Planet.SUN, Planet.VENUS, Planet.MERCURY),
        ZodiacSign.LIBRA: (Planet.MOON, Planet.SATURN, Planet.JUPITER),
        ZodiacSign.SCORPIO: (Planet.MARS, Planet.SUN, Planet.VENUS),
        ZodiacSign.SAGITTARIUS: (Planet.MERCURY, Planet.MOON, Planet.SATURN),
        ZodiacSign.CAPRICORN: (Planet.JUPITER, Planet.MARS, Planet.SUN),
        ZodiacSign.AQUARIUS: (Planet.VENUS, Planet.MERCURY, Planet.MOON),
        ZodiacSign.PISCES: (Planet.SATURN, Planet.JUPITER, Planet.MARS),
    }
    assert dict(DECAN_RULERS) == expected


@pytest.mark.parametrize(
    ("degree", "index"),
    [(0, 0), (9.999, 0), (10, 1), (19.5, 1), (20, 2), (29.999, 2)],
)
def test_decan_index(degree, index):
    assert decan_index(degree) == index


def test_decan_ruler_lookup():
    assert decan_ruler(ZodiacSign.LEO, 15) is Planet.JUPITER


@pytest.mark.parametrize(
    "degree", [30, 30.0, -0.001, float("nan"), float("inf"), "abc", True, False]
)
def test_out_of_range_degrees_are_rejected(degree):
    with pytest.raises(DegreeOutOfRangeError):
        validate_degree(degree)
    with pytest.raises(DegreeOutOfRangeError):
        term_ruler(ZodiacSign.ARIES, degree)


def test_enum_parsing_is_case_insensitive_and_strict():
    assert Planet.parse("Sun") is Planet.SUN
    assert Planet.parse(" MERCURY ") is Planet.MERCURY
    assert ZodiacSign.parse(ZodiacSign.LEO) is ZodiacSign.LEO
    with pytest.raises(UnknownValueError):
        Planet.parse("Pluto")
    with pytest.raises(UnknownValueError):
        ZodiacSign.parse(7)
    with pytest.raises(KeyError):
        Element.parse("aether")


def test_sign_from_longitude():
    assert sign_from_longitude(0) is ZodiacSign.ARIES
    assert sign_from_longitude(139.5) is ZodiacSign.LEO
    assert sign_from_longitude(-1) is ZodiacSign.PISCES
    assert ZodiacSign.LEO.ordinal == 4
