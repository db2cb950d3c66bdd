from __future__ import annotations

from datetime import timedelta

from nujum.engine.hours import hour_snapshot
from nujum.reference import Element, Planet, ZodiacSign
from nujum.transit import hour_transit, primary_sign


def test_primary_sign_is_first_domicile():
    assert primary_sign(Planet.SUN) is ZodiacSign.LEO
    assert primary_sign("mercury") is ZodiacSign.GEMINI
    assert primary_sign(Planet.SATURN) is ZodiacSign.CAPRICORN


def test_hour_transit_describes_current_ruler(solar_day):
    now = solar_day.sunrise + timedelta(minutes=70)
    transit = hour_transit(hour_snapshot(now, solar_day))

    assert transit.planet is Planet.MOON
    assert transit.element is Element.WATER
    assert transit.sign is ZodiacSign.CANCER
    assert transit.hour_number == 2
    assert transit.next_hour_start == solar_day.sunrise + timedelta(minutes=122)
    assert transit.countdown_seconds == 52 * 60

    payload = transit.to_payload()
    assert payload["planet_key"] == "moon"
    assert payload["planet_name"] == "Moon"
    assert payload["zodiac"] == "cancer"
    assert payload["updated_at"] == now.isoformat()
