from __future__ import annotations

from datetime import date, datetime

import pytest

from nujum.engine.dignity import ConditionTier, EclipticPosition
from nujum.engine.hours import planetary_hours
from nujum.providers import ProviderError, evaluate_planets, solar_day_for
from nujum.reference import Planet, Weekday
from tests.conftest import RIYADH


class BrokenSolarProvider:
    provider_id = "broken"

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def sun_times(self, day, location):
        raise self.exc


class TableEphemeris:
    def __init__(self, positions) -> None:
        self.positions = positions

    def position(self, planet, moment):
        return self.positions[planet]


def test_solar_day_after_sunrise_uses_today(solar_provider, location):
    now = datetime(2024, 3, 20, 10, 0, tzinfo=RIYADH)
    day = solar_day_for(now, location, solar_provider)

    assert day.sunrise == datetime(2024, 3, 20, 6, 0, tzinfo=RIYADH)
    assert day.sunset == datetime(2024, 3, 20, 18, 0, tzinfo=RIYADH)
    assert day.next_sunrise == datetime(2024, 3, 21, 6, 0, tzinfo=RIYADH)
    assert day.weekday is Weekday.WEDNESDAY
    assert solar_provider.calls == [date(2024, 3, 20), date(2024, 3, 21)]


def test_solar_day_before_sunrise_belongs_to_yesterday(solar_provider, location):
    now = datetime(2024, 3, 20, 4, 30, tzinfo=RIYADH)
    day = solar_day_for(now, location, solar_provider)

    assert day.sunrise == datetime(2024, 3, 19, 6, 0, tzinfo=RIYADH)
    assert day.next_sunrise == datetime(2024, 3, 20, 6, 0, tzinfo=RIYADH)
    assert day.contains(now)
    table = planetary_hours(day)
    assert table.day_ruler is Planet.MARS
    assert table.hour_at(now).hour_number == 23


@pytest.mark.parametrize(
    ("exc", "retriable"),
    [(OSError("network down"), True), (ValueError("polar night"), False)],
)
def test_solar_provider_failures_are_wrapped(location, exc, retriable):
    with pytest.raises(ProviderError) as info:
        solar_day_for(datetime(2024, 3, 20, 10, tzinfo=RIYADH), location, BrokenSolarProvider(exc))

    assert info.value.provider_id == "broken"
    assert info.value.retriable is retriable
    assert info.value.__cause__ is exc
    assert info.value.context["date"] == "2024-03-20"


def test_provider_errors_pass_through(location):
    upstream = ProviderError("quota exceeded", provider_id="remote", retriable=True)
    with pytest.raises(ProviderError) as info:
        solar_day_for(
            datetime(2024, 3, 20, 10, tzinfo=RIYADH), location, BrokenSolarProvider(upstream)
        )

    assert info.value is upstream


def test_evaluate_planets_scores_each_position():
    ephemeris = TableEphemeris(
        {
            Planet.SUN: EclipticPosition(Planet.SUN, "leo", 19.0),
            Planet.SATURN: EclipticPosition(Planet.SATURN, "aries", 5.0, is_retrograde=True),
        }
    )
    results = evaluate_planets(
        datetime(2024, 8, 11, 12, tzinfo=RIYADH),
        ephemeris,
        is_day=True,
        planets=[Planet.SUN, "saturn"],
    )

    assert set(results) == {Planet.SUN, Planet.SATURN}
    assert results[Planet.SUN].total_score == 8
    assert results[Planet.SATURN].condition is ConditionTier.CAUTIOUS


def test_evaluate_planets_rejects_wrong_planet():
    ephemeris = TableEphemeris({Planet.MOON: EclipticPosition(Planet.MARS, "aries", 1.0)})

    with pytest.raises(ProviderError):
        evaluate_planets(
            datetime(2024, 8, 11, 12, tzinfo=RIYADH), ephemeris, is_day=True, planets=[Planet.MOON]
        )


def test_evaluate_planets_wraps_runtime_failures():
    class Offline:
        provider_id = "offline"

        def position(self, planet, moment):
            raise ConnectionError("unreachable")

    with pytest.raises(ProviderError) as info:
        evaluate_planets(datetime(2024, 8, 11, 12, tzinfo=RIYADH), Offline(), is_day=False)

    assert info.value.retriable
    assert info.value.context["planet"] == "saturn"
