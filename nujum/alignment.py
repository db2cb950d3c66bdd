"""Element harmony between a person and the ruler of the current hour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .config.settings import AlignmentCfg, Settings, default_settings
from .engine.hours.models import PlanetaryHour
from .reference.planets import Element, LookupEnum, Planet, planet_info

__all__ = [
    "AlignmentStatus",
    "BadgeTier",
    "Alignment",
    "Badge",
    "COMPLEMENTARY_PAIRS",
    "alignment_status",
    "harmony_score",
    "badge_tier",
    "badge_for_score",
    "score_alignment",
    "alignment_for_hour",
]


class AlignmentStatus(LookupEnum):
    ACT = "act"
    MAINTAIN = "maintain"
    HOLD = "hold"


class BadgeTier(LookupEnum):
    AUSPICIOUS = "auspicious"
    PROCEED = "proceed"
    NEUTRAL = "neutral"
    CAUTIOUS = "cautious"
    INAUSPICIOUS = "inauspicious"


COMPLEMENTARY_PAIRS: frozenset[frozenset[Element]] = frozenset(
    {
        frozenset({Element.FIRE, Element.AIR}),
        frozenset({Element.WATER, Element.EARTH}),
    }
)


_BADGE_LABELS: Mapping[BadgeTier, tuple[str, str, str]] = {
    BadgeTier.AUSPICIOUS: ("Auspicious", "سعيد", "#FFD700"),
    BadgeTier.PROCEED: ("Proceed Mindfully", "تأنَّ", "#FFA500"),
    BadgeTier.NEUTRAL: ("Neutral Window", "وقت محايد", "#64748B"),
    BadgeTier.CAUTIOUS: ("Cautious", "احترس", "#FF6B35"),
    BadgeTier.INAUSPICIOUS: ("Inauspicious", "نحس", "#EF4444"),
}


@dataclass(frozen=True)
class Badge:
    tier: BadgeTier
    label_en: str
    label_ar: str
    color: str
    score: int


@dataclass(frozen=True)
class Alignment:
    user_element: Element
    time_element: Element
    status: AlignmentStatus
    score: int
    badge: Badge

    def to_payload(self) -> dict[str, object]:
        return {
            "user_element": self.user_element.value,
            "time_element": self.time_element.value,
            "status": self.status.value.upper(),
            "score": self.score,
            "badge": {
                "tier": self.badge.tier.value,
                "label_en": self.badge.label_en,
                "label_ar": self.badge.label_ar,
                "color": self.badge.color,
            },
        }


def _alignment_cfg(settings: Settings | AlignmentCfg | None) -> AlignmentCfg:
    if settings is None:
        return default_settings().alignment
    if isinstance(settings, AlignmentCfg):
        return settings
    return settings.alignment


def alignment_status(user_element: Element | str, time_element: Element | str) -> AlignmentStatus:
    user = Element.parse(user_element)
    time = Element.parse(time_element)
    if user == time:
        return AlignmentStatus.ACT
    if frozenset({user, time}) in COMPLEMENTARY_PAIRS:
        return AlignmentStatus.MAINTAIN
    return AlignmentStatus.HOLD


def harmony_score(
    user_element: Element | str,
    time_element: Element | str,
    *,
    settings: Settings | AlignmentCfg | None = None,
) -> int:
    cfg = _alignment_cfg(settings)
    status = alignment_status(user_element, time_element)
    return {
        AlignmentStatus.ACT: cfg.act_score,
        AlignmentStatus.MAINTAIN: cfg.maintain_score,
        AlignmentStatus.HOLD: cfg.hold_score,
    }[status]


def badge_tier(score: int, *, settings: Settings | AlignmentCfg | None = None) -> BadgeTier:
    cfg = _alignment_cfg(settings)
    if score >= cfg.auspicious_min:
        return BadgeTier.AUSPICIOUS
    if score >= cfg.proceed_min:
        return BadgeTier.PROCEED
    if score >= cfg.neutral_min:
        return BadgeTier.NEUTRAL
    if score >= cfg.cautious_min:
        return BadgeTier.CAUTIOUS
    return BadgeTier.INAUSPICIOUS


def badge_for_score(score: int, *, settings: Settings | AlignmentCfg | None = None) -> Badge:
    tier = badge_tier(score, settings=settings)
    label_en, label_ar, color = _BADGE_LABELS[tier]
    return Badge(tier=tier, label_en=label_en, label_ar=label_ar, color=color, score=int(score))


def score_alignment(
    user_element: Element | str,
    time_element: Element | str,
    *,
    settings: Settings | AlignmentCfg | None = None,
) -> Alignment:
    """Return status, 0-100 harmony score and advisory badge for an element pairing."""

    user = Element.parse(user_element)
    time = Element.parse(time_element)
    score = harmony_score(user, time, settings=settings)
    return Alignment(
        user_element=user,
        time_element=time,
        status=alignment_status(user, time),
        score=score,
        badge=badge_for_score(score, settings=settings),
    )


def alignment_for_hour(
    user_element: Element | str,
    hour: PlanetaryHour | Planet | str,
    *,
    settings: Settings | AlignmentCfg | None = None,
) -> Alignment:
    """Score ``user_element`` against the home element of the hour's ruling planet."""

    planet = hour.planet if isinstance(hour, PlanetaryHour) else Planet.parse(hour)
    return score_alignment(user_element, planet_info(planet).element, settings=settings)
