"""Essential dignity evaluation."""

from __future__ import annotations

from .evaluator import (
    condition_tier,
    detailed_condition,
    evaluate_dignities,
    evaluate_position,
    is_debilitated,
    is_dignified,
    practice_hint,
    primary_entry,
    simple_practice_hint,
    simplified_status,
)
from .models import (
    CONDITION_LABELS,
    DETAILED_CONDITION_LABELS,
    DIGNITY_LABELS,
    PLANET_DHIKR,
    PROTECTIVE_DHIKR,
    UNIVERSAL_DHIKR,
    ConditionTier,
    DetailedCondition,
    DignityEntry,
    DignityResult,
    DignityType,
    EclipticPosition,
    PracticeHint,
    SimplifiedStatus,
    TierGuidance,
)

__all__ = [
    "CONDITION_LABELS",
    "DETAILED_CONDITION_LABELS",
    "DIGNITY_LABELS",
    "PLANET_DHIKR",
    "PROTECTIVE_DHIKR",
    "UNIVERSAL_DHIKR",
    "ConditionTier",
    "DetailedCondition",
    "DignityEntry",
    "DignityResult",
    "DignityType",
    "EclipticPosition",
    "PracticeHint",
    "SimplifiedStatus",
    "TierGuidance",
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
