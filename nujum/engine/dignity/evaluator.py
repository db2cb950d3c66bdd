"""Essential dignity scoring and tier classification."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ...config.settings import DignityCfg, Settings, default_settings
from ...reference.planets import Planet
from ...reference.zodiac import ZodiacSign, validate_degree
from .models import (
    CONDITION_LABELS,
    PLANET_DHIKR,
    PROTECTIVE_DHIKR,
    UNIVERSAL_DHIKR,
    ConditionTier,
    DetailedCondition,
    DignityEntry,
    DignityResult,
    DignityType,
    EclipticPosition,
    SimplifiedStatus,
    TierGuidance,
)
from .rules import POSITIVE_RULES, RULES, Placement, rule_weight

LOG = logging.getLogger(__name__)

__all__ = [
    "condition_tier",
    "detailed_condition",
    "evaluate_dignities",
    "evaluate_position",
    "is_debilitated",
    "is_dignified",
    "practice_hint",
    "primary_entry",
    "simple_practice_hint",
    "simplified_status",
]

_SCORE_CLAMP = 10


def _dignity_cfg(settings: Settings | DignityCfg | None) -> DignityCfg:
    if settings is None:
        return default_settings().dignity
    if isinstance(settings, DignityCfg):
        return settings
    return settings.dignity


def condition_tier(total_score: int, settings: Settings | DignityCfg | None = None) -> ConditionTier:
    """Map a total score onto Favorable / Moderate / Cautious using exact integer bounds."""

    cfg = _dignity_cfg(settings)
    if total_score >= cfg.favorable_min:
        return ConditionTier.FAVORABLE
    if total_score <= cfg.cautious_max:
        return ConditionTier.CAUTIOUS
    return ConditionTier.MODERATE


def detailed_condition(total_score: int) -> DetailedCondition:
    score = max(-_SCORE_CLAMP, min(_SCORE_CLAMP, int(total_score)))
    if score >= 8:
        return DetailedCondition.MUSHARRAF
    if score >= 5:
        return DetailedCondition.QAWI
    if score >= 2:
        return DetailedCondition.SAID
    if score >= -1:
        return DetailedCondition.MUTADIL
    if score >= -4:
        return DetailedCondition.NAHS
    if score >= -7:
        return DetailedCondition.DAIF
    return DetailedCondition.MUBTALA


def primary_entry(entries: Iterable[DignityEntry]) -> DignityEntry:
    """Return the entry with the largest absolute score, ties broken by rule order."""

    ranked = sorted(entries, key=lambda entry: (-abs(entry.score), entry.type.order))
    if not ranked:
        raise ValueError("primary_entry requires at least one dignity entry")
    return ranked[0]


def evaluate_dignities(
    planet: Planet | str,
    sign: ZodiacSign | str,
    degree: float,
    is_day: bool = True,
    is_retrograde: bool = False,
    *,
    settings: Settings | DignityCfg | None = None,
) -> DignityResult:
    """Evaluate every essential dignity rule for ``planet`` at ``degree`` of ``sign``.

    Each rule is checked on its own and all applicable scores are summed;
    Peregrine is reported when no positive rule applied and a retrograde
    planet takes a single flat penalty. ``degree`` must lie in ``[0, 30)``.
    """

    cfg = _dignity_cfg(settings)
    placement = Placement(
        planet=Planet.parse(planet),
        sign=ZodiacSign.parse(sign),
        degree=validate_degree(degree),
        is_day=bool(is_day),
    )

    entries: list[DignityEntry] = []
    for rule in RULES:
        detail = rule.applies(placement, cfg)
        if detail is not None:
            entries.append(DignityEntry(rule.type, rule_weight(rule.type, cfg), detail))

    positive = {rule.type for rule in POSITIVE_RULES}
    if not any(entry.type in positive for entry in entries):
        entries.append(
            DignityEntry(
                DignityType.PEREGRINE,
                rule_weight(DignityType.PEREGRINE, cfg),
                f"no essential dignity in {placement.sign.label}",
            )
        )

    penalty = int(cfg.weights.retrograde) if is_retrograde else 0
    total = sum(entry.score for entry in entries) + penalty
    tier = condition_tier(total, cfg)

    LOG.debug(
        "Dignity %s %.2f° %s (%s%s): %s -> %d %s",
        placement.planet.label,
        placement.degree,
        placement.sign.label,
        "day" if placement.is_day else "night",
        ", retrograde" if is_retrograde else "",
        ", ".join(entry.type.value for entry in entries),
        total,
        tier.value,
    )

    return DignityResult(
        planet=placement.planet,
        sign=placement.sign,
        degree=placement.degree,
        is_day=placement.is_day,
        is_retrograde=bool(is_retrograde),
        entries=tuple(entries),
        retrograde_penalty=penalty,
        total_score=total,
        condition=tier,
        detailed_condition=detailed_condition(total),
        primary=primary_entry(entries),
        by_type={entry.type: entry for entry in entries},
    )


def evaluate_position(
    position: EclipticPosition,
    is_day: bool = True,
    *,
    settings: Settings | DignityCfg | None = None,
) -> DignityResult:
    return evaluate_dignities(
        position.planet,
        position.sign,
        position.degree,
        is_day,
        position.is_retrograde,
        settings=settings,
    )


def simplified_status(result: DignityResult) -> SimplifiedStatus:
    """Collapse a result into the user-facing label, reason and guidance."""

    labels = CONDITION_LABELS[result.condition]
    description = result.primary.labels.description
    return SimplifiedStatus(
        tier=result.condition,
        label_ar=labels.arabic,
        label_en=labels.english,
        reason=f"{result.planet.label} is {description} in {result.sign.label}",
        guidance=labels.guidance,
        color=labels.color,
        icon=labels.icon,
    )


def practice_hint(tier: ConditionTier | str, planet: Planet | str) -> TierGuidance:
    """Return the recitation suited to a condition tier.

    A favourable placement calls for the planet's own Divine Name, a moderate
    one for the universal ṣalawāt and a cautious one for Yā Laṭīf.
    """

    tier = ConditionTier.parse(tier)
    planet = Planet.parse(planet)
    if tier is ConditionTier.FAVORABLE:
        hint = PLANET_DHIKR[planet]
        return TierGuidance(
            tier=tier,
            primary=hint,
            guidance=f"Excellent time for {hint.instruction.lower().removeprefix('for ')}",
            guidance_ar="وقت مبارك للذكر والعبادة",
        )
    if tier is ConditionTier.MODERATE:
        return TierGuidance(
            tier=tier,
            primary=UNIVERSAL_DHIKR,
            guidance="Steady practice brings consistent benefit",
            guidance_ar="المداومة على الذكر تجلب البركة",
        )
    return TierGuidance(
        tier=tier,
        primary=PROTECTIVE_DHIKR[0],
        guidance="Focus on protection and istighfār",
        guidance_ar="التوجه للحماية والاستغفار",
    )


def simple_practice_hint(tier: ConditionTier | str, planet: Planet | str) -> dict[str, str]:
    guidance = practice_hint(tier, planet)
    return {
        "hint": guidance.primary.instruction,
        "hint_ar": guidance.guidance_ar,
        "name": guidance.primary.transliteration,
        "name_ar": guidance.primary.arabic_name,
    }


def is_dignified(
    planet: Planet | str,
    sign: ZodiacSign | str,
    degree: float,
    is_day: bool = True,
    *,
    settings: Settings | DignityCfg | None = None,
) -> bool:
    return evaluate_dignities(planet, sign, degree, is_day, settings=settings).total_score > 0


def is_debilitated(
    planet: Planet | str,
    sign: ZodiacSign | str,
    degree: float,
    is_day: bool = True,
    *,
    settings: Settings | DignityCfg | None = None,
) -> bool:
    return evaluate_dignities(planet, sign, degree, is_day, settings=settings).total_score < 0
