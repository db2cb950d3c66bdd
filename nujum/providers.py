"""Inbound ports for solar and ecliptic data and helpers that wire them to the calculators."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Protocol

from .config.settings import Settings
from .engine.dignity.evaluator import evaluate_position
from .engine.dignity.models import DignityResult, EclipticPosition
from .engine.hours.models import GeoLocation, SolarDay, to_utc
from .reference.planets import CHALDEAN_ORDER, Planet

LOG = logging.getLogger(__name__)

__all__ = [
    "EclipticPosition",
    "EclipticPositionProvider",
    "ProviderError",
    "SolarPositionProvider",
    "SunTimes",
    "evaluate_planets",
    "solar_day_for",
]


class ProviderError(RuntimeError):
    """Structured error raised when an external provider cannot satisfy a request."""

    def __init__(
        self,
        message: str,
        *,
        provider_id: str | None = None,
        retriable: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.provider_id = provider_id
        self.retriable = retriable
        self.context = dict(context or {})


@dataclass(frozen=True)
class SunTimes:
    sunrise: datetime
    sunset: datetime


class SolarPositionProvider(Protocol):
    """Returns sunrise and sunset for a civil date at a location."""

    def sun_times(self, day: date, location: GeoLocation) -> SunTimes:
        ...


class EclipticPositionProvider(Protocol):
    """Returns the zodiacal position of a planet at a moment."""

    def position(self, planet: Planet, moment: datetime) -> EclipticPosition:
        ...


def _provider_id(provider: object) -> str:
    return getattr(provider, "provider_id", type(provider).__name__)


def _sun_times(provider: SolarPositionProvider, day: date, location: GeoLocation) -> SunTimes:
    try:
        return provider.sun_times(day, location)
    except ProviderError as exc:
        LOG.warning("Solar provider %s failed for %s: %s", _provider_id(provider), day, exc)
        raise
    except (OSError, ValueError, RuntimeError) as exc:
        LOG.warning("Solar provider %s failed for %s: %s", _provider_id(provider), day, exc)
        raise ProviderError(
            f"Solar provider could not compute sun times for {day.isoformat()}",
            provider_id=_provider_id(provider),
            retriable=isinstance(exc, OSError),
            context={"date": day.isoformat(), "latitude": location.latitude},
        ) from exc


def solar_day_for(
    now: datetime, location: GeoLocation, provider: SolarPositionProvider
) -> SolarDay:
    """Return the solar day containing ``now``.

    Before today's sunrise the planetary day still belongs to yesterday, so
    yesterday's sunrise/sunset are paired with today's sunrise.
    """

    today = now.date()
    times = _sun_times(provider, today, location)
    if to_utc(now) < to_utc(times.sunrise):
        previous = _sun_times(provider, today - timedelta(days=1), location)
        return SolarDay(previous.sunrise, previous.sunset, times.sunrise, location)
    following = _sun_times(provider, today + timedelta(days=1), location)
    return SolarDay(times.sunrise, times.sunset, following.sunrise, location)


def evaluate_planets(
    moment: datetime,
    provider: EclipticPositionProvider,
    *,
    is_day: bool,
    planets: Iterable[Planet] = CHALDEAN_ORDER,
    settings: Settings | None = None,
) -> dict[Planet, DignityResult]:
    """Fetch each planet's position and evaluate its dignities.

    Provider failures surface as :class:`ProviderError` so the caller can
    substitute approximate positions and mark them non-authoritative.
    """

    results: dict[Planet, DignityResult] = {}
    for planet in planets:
        planet = Planet.parse(planet)
        try:
            position = provider.position(planet, moment)
        except ProviderError:
            LOG.warning("Ecliptic provider %s failed for %s", _provider_id(provider), planet.label)
            raise
        except (OSError, RuntimeError) as exc:
            LOG.warning(
                "Ecliptic provider %s failed for %s: %s", _provider_id(provider), planet.label, exc
            )
            raise ProviderError(
                f"Ecliptic provider could not locate {planet.label}",
                provider_id=_provider_id(provider),
                retriable=isinstance(exc, OSError),
                context={"planet": planet.value, "moment": moment.isoformat()},
            ) from exc
        if position.planet != planet:
            raise ProviderError(
                f"Provider returned {position.planet.label} when asked for {planet.label}",
                provider_id=_provider_id(provider),
            )
        results[planet] = evaluate_position(position, is_day, settings=settings)
    return results
