"""Independent predicates for each essential dignity rule.

Every predicate receives the same placement and returns a short detail
string when the rule applies, or ``None`` when it does not. Predicates never
look at each other's results except Peregrine, which is derived.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Tuple

from ...config.settings import DignityCfg
from ...reference.dignities import (
    DETRIMENTS,
    EXALTATIONS,
    FALLS,
    decan_index,
    decan_ruler,
    term_span,
    triplicity_rulers,
)
from ...reference.planets import Planet
from ...reference.zodiac import PLANET_RULERSHIPS, ZodiacSign
from .models import DignityType

__all__ = [
    "Placement",
    "Rule",
    "POSITIVE_RULES",
    "DEBILITY_RULES",
    "RULES",
    "rule_weight",
]


@dataclass(frozen=True)
class Placement:
    planet: Planet
    sign: ZodiacSign
    degree: float
    is_day: bool


Predicate = Callable[[Placement, DignityCfg], str | None]


@dataclass(frozen=True)
class Rule:
    type: DignityType
    applies: Predicate


def _fmt(degree: float) -> str:
    return f"{degree:g}"


def exaltation(p: Placement, cfg: DignityCfg) -> str | None:
    exalt = EXALTATIONS[p.planet]
    if p.sign == exalt.sign:
        return f"exalted in {exalt.sign.label} (classical degree {exalt.degree})"
    return None


def domicile(p: Placement, cfg: DignityCfg) -> str | None:
    if p.sign in PLANET_RULERSHIPS[p.planet]:
        return f"rules {p.sign.label}"
    return None


def triplicity(p: Placement, cfg: DignityCfg) -> str | None:
    rulers = triplicity_rulers(p.sign)
    if rulers.for_sect(p.is_day) == p.planet:
        return f"{'day' if p.is_day else 'night'} ruler of {rulers.element.label}"
    if cfg.count_participating_triplicity and rulers.participating == p.planet:
        return f"participating ruler of {rulers.element.label}"
    return None


def term(p: Placement, cfg: DignityCfg) -> str | None:
    span = term_span(p.sign, p.degree)
    if span.ruler == p.planet:
        return f"{_fmt(span.start_deg)}-{_fmt(span.end_deg)}° of {p.sign.label}"
    return None


def face(p: Placement, cfg: DignityCfg) -> str | None:
    if decan_ruler(p.sign, p.degree) == p.planet:
        idx = decan_index(p.degree)
        return f"decan {idx + 1} ({idx * 10}-{idx * 10 + 10}°) of {p.sign.label}"
    return None


def fall(p: Placement, cfg: DignityCfg) -> str | None:
    if FALLS[p.planet] == p.sign:
        return f"falls in {p.sign.label}"
    return None


def detriment(p: Placement, cfg: DignityCfg) -> str | None:
    if p.sign in DETRIMENTS[p.planet]:
        return f"detriment in {p.sign.label}"
    return None


POSITIVE_RULES: Tuple[Rule, ...] = (
    Rule(DignityType.EXALTATION, exaltation),
    Rule(DignityType.DOMICILE, domicile),
    Rule(DignityType.TRIPLICITY, triplicity),
    Rule(DignityType.TERM, term),
    Rule(DignityType.FACE, face),
)

DEBILITY_RULES: Tuple[Rule, ...] = (
    Rule(DignityType.FALL, fall),
    Rule(DignityType.DETRIMENT, detriment),
)

RULES: Tuple[Rule, ...] = POSITIVE_RULES + DEBILITY_RULES


def rule_weight(dignity: DignityType, cfg: DignityCfg) -> int:
    weights: Mapping[DignityType, int] = {
        DignityType.EXALTATION: cfg.weights.exaltation,
        DignityType.DOMICILE: cfg.weights.domicile,
        DignityType.TRIPLICITY: cfg.weights.triplicity,
        DignityType.TERM: cfg.weights.term,
        DignityType.FACE: cfg.weights.face,
        DignityType.FALL: cfg.weights.fall,
        DignityType.DETRIMENT: cfg.weights.detriment,
        DignityType.PEREGRINE: cfg.weights.peregrine,
    }
    return int(weights[dignity])
