"""Typed containers produced by the essential dignity evaluator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Tuple

from ...reference.planets import LookupEnum, Planet
from ...reference.zodiac import ZodiacSign, validate_degree

__all__ = [
    "DignityType",
    "ConditionTier",
    "DetailedCondition",
    "DignityLabels",
    "ConditionLabels",
    "DIGNITY_LABELS",
    "CONDITION_LABELS",
    "DETAILED_CONDITION_LABELS",
    "EclipticPosition",
    "DignityEntry",
    "DignityResult",
    "SimplifiedStatus",
    "PracticeHint",
    "TierGuidance",
    "PLANET_DHIKR",
    "PROTECTIVE_DHIKR",
    "UNIVERSAL_DHIKR",
]


class DignityType(LookupEnum):
    """Rule categories, declared in evaluation and tie-break order."""

    EXALTATION = "exaltation"
    DOMICILE = "domicile"
    TRIPLICITY = "triplicity"
    TERM = "term"
    FACE = "face"
    FALL = "fall"
    DETRIMENT = "detriment"
    PEREGRINE = "peregrine"

    @property
    def order(self) -> int:
        return tuple(DignityType).index(self)


class ConditionTier(LookupEnum):
    """Three-tier user-facing classification of a total score."""

    FAVORABLE = "favorable"
    MODERATE = "moderate"
    CAUTIOUS = "cautious"


class DetailedCondition(LookupEnum):
    """Seven-tier condition over the score clamped to [-10, +10]."""

    MUSHARRAF = "musharraf"
    QAWI = "qawi"
    SAID = "said"
    MUTADIL = "mutadil"
    NAHS = "nahs"
    DAIF = "daif"
    MUBTALA = "mubtala"


@dataclass(frozen=True)
class DignityLabels:
    arabic: str
    transliteration: str
    english: str
    french: str
    description: str


@dataclass(frozen=True)
class ConditionLabels:
    arabic: str
    transliteration: str
    english: str
    color: str
    french: str = ""
    icon: str = "●"
    guidance: str = ""


DIGNITY_LABELS: Mapping[DignityType, DignityLabels] = {
    DignityType.EXALTATION: DignityLabels("شَرَف", "Sharaf", "Exalted", "Exalté", "exalted"),
    DignityType.DOMICILE: DignityLabels("بَيْت", "Bayt", "Domicile", "Domicile", "at home"),
    DignityType.TRIPLICITY: DignityLabels(
        "مُثَلَّثَة", "Muthallatha", "Triplicity", "Triplicité", "strong"
    ),
    DignityType.TERM: DignityLabels("حَدّ", "Ḥadd", "Terms", "Termes", "comfortable"),
    DignityType.FACE: DignityLabels("وَجْه", "Wajh", "Face", "Face", "comfortable"),
    DignityType.FALL: DignityLabels("هُبُوط", "Hubūṭ", "Fall", "Chute", "weakened"),
    DignityType.DETRIMENT: DignityLabels("ضَارّ", "Ḍārr", "Detriment", "Détriment", "weakened"),
    DignityType.PEREGRINE: DignityLabels("غَرِيب", "Gharīb", "Peregrine", "Pèlerin", "neutral"),
}


CONDITION_LABELS: Mapping[ConditionTier, ConditionLabels] = {
    ConditionTier.FAVORABLE: ConditionLabels(
        "سَعِيد",
        "Saʿīd",
        "Favorable",
        "#22C55E",
        french="Favorable",
        guidance="Excellent for prayers, zikr, and new intentions",
    ),
    ConditionTier.MODERATE: ConditionLabels(
        "مُعْتَدِل",
        "Muʿtadil",
        "Moderate",
        "#3B82F6",
        french="Modéré",
        guidance="Suitable for regular practice and reflection",
    ),
    ConditionTier.CAUTIOUS: ConditionLabels(
        "مَحْذُور",
        "Maḥdhūr",
        "Cautious",
        "#F59E0B",
        french="Prudence",
        icon="⚠",
        guidance="Focus on istighfar and protective adhkār",
    ),
}


DETAILED_CONDITION_LABELS: Mapping[DetailedCondition, ConditionLabels] = {
    DetailedCondition.MUSHARRAF: ConditionLabels("مُشَرَّف", "Musharraf", "Exalted", "#D4AF37", "Exalté"),
    DetailedCondition.QAWI: ConditionLabels("قَوِي", "Qawī", "Strong", "#22C55E", "Fort"),
    DetailedCondition.SAID: ConditionLabels("سَعِيد", "Saʿīd", "Favourable", "#14B8A6", "Favorable"),
    DetailedCondition.MUTADIL: ConditionLabels("مُعْتَدِل", "Muʿtadil", "Moderate", "#3B82F6", "Modéré"),
    DetailedCondition.NAHS: ConditionLabels("نَحْس", "Naḥs", "Challenging", "#F59E0B", "Difficile"),
    DetailedCondition.DAIF: ConditionLabels("ضَعِيف", "Ḍaʿīf", "Weak", "#EF4444", "Faible"),
    DetailedCondition.MUBTALA: ConditionLabels("مُبْتَلى", "Mubtalā", "Afflicted", "#991B1B", "Affligé"),
}


@dataclass(frozen=True)
class EclipticPosition:
    """Position of a planet as reported by an ephemeris provider."""

    planet: Planet
    sign: ZodiacSign
    degree: float
    is_retrograde: bool = False
    authoritative: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "planet", Planet.parse(self.planet))
        object.__setattr__(self, "sign", ZodiacSign.parse(self.sign))
        object.__setattr__(self, "degree", validate_degree(self.degree))

    @property
    def longitude(self) -> float:
        return self.sign.ordinal * 30.0 + self.degree


@dataclass(frozen=True)
class DignityEntry:
    """A single applicable rule and its signed score."""

    type: DignityType
    score: int
    detail: str | None = None

    @property
    def labels(self) -> DignityLabels:
        return DIGNITY_LABELS[self.type]

    @property
    def label(self) -> str:
        return self.labels.english

    def to_payload(self) -> dict[str, object]:
        labels = self.labels
        return {
            "type": self.type.value,
            "score": self.score,
            "detail": self.detail,
            "label_ar": labels.arabic,
            "transliteration": labels.transliteration,
            "label_en": labels.english,
            "label_fr": labels.french,
        }


@dataclass(frozen=True)
class DignityResult:
    """Outcome of evaluating every rule for one planet placement."""

    planet: Planet
    sign: ZodiacSign
    degree: float
    is_day: bool
    is_retrograde: bool
    entries: Tuple[DignityEntry, ...]
    retrograde_penalty: int
    total_score: int
    condition: ConditionTier
    detailed_condition: DetailedCondition
    primary: DignityEntry
    by_type: Mapping[DignityType, DignityEntry] = field(default_factory=dict, compare=False)

    def has(self, dignity: DignityType | str) -> bool:
        return DignityType.parse(dignity) in self.by_type

    @property
    def is_peregrine(self) -> bool:
        return DignityType.PEREGRINE in self.by_type

    @property
    def condition_labels(self) -> ConditionLabels:
        return CONDITION_LABELS[self.condition]

    def to_payload(self) -> dict[str, object]:
        return {
            "planet": self.planet.label,
            "sign": self.sign.label,
            "degree": self.degree,
            "is_day": self.is_day,
            "is_retrograde": self.is_retrograde,
            "entries": [entry.to_payload() for entry in self.entries],
            "primary": self.primary.to_payload(),
            "retrograde_penalty": self.retrograde_penalty,
            "total_score": self.total_score,
            "condition": self.condition.value,
            "detailed_condition": self.detailed_condition.value,
        }


@dataclass(frozen=True)
class SimplifiedStatus:
    tier: ConditionTier
    label_ar: str
    label_en: str
    reason: str
    guidance: str
    color: str
    icon: str


@dataclass(frozen=True)
class PracticeHint:
    """A Divine Name with its recitation count and purpose."""

    arabic_name: str
    transliteration: str
    meaning: str
    instruction: str
    count: int | None = None

    def to_payload(self) -> dict[str, object]:
        return {
            "arabic_name": self.arabic_name,
            "transliteration": self.transliteration,
            "meaning": self.meaning,
            "count": self.count,
            "instruction": self.instruction,
        }


@dataclass(frozen=True)
class TierGuidance:
    tier: ConditionTier
    primary: PracticeHint
    guidance: str
    guidance_ar: str


# Recommended when the planet itself is favourably placed.
PLANET_DHIKR: Mapping[Planet, PracticeHint] = {
    Planet.SUN: PracticeHint(
        "يَا نُور", "Yā Nūr", "O Light", "For clarity and spiritual illumination", 256
    ),
    Planet.MOON: PracticeHint(
        "يَا رَحْمَٰن",
        "Yā Raḥmān",
        "O Most Merciful",
        "For ease in transitions and emotional balance",
        298,
    ),
    Planet.MARS: PracticeHint(
        "يَا قَوِيّ", "Yā Qawiyy", "O Most Strong", "For inner strength and resilience", 41
    ),
    Planet.MERCURY: PracticeHint(
        "يَا عَلِيم", "Yā ʿAlīm", "O All-Knowing", "For clarity and beneficial knowledge", 150
    ),
    Planet.JUPITER: PracticeHint(
        "يَا رَزَّاق", "Yā Razzāq", "O Provider", "For provision and barakah", 308
    ),
    Planet.VENUS: PracticeHint(
        "يَا وَدُود", "Yā Wadūd", "O Most Loving", "For harmony and softening hearts", 20
    ),
    Planet.SATURN: PracticeHint(
        "يَا صَبُور", "Yā Ṣabūr", "O Most Patient", "For patience and steadfastness", 298
    ),
}


PROTECTIVE_DHIKR: Tuple[PracticeHint, ...] = (
    PracticeHint(
        "يَا لَطِيف",
        "Yā Laṭīf",
        "O Most Subtle, Most Kind",
        "Softens difficulties and eases hardship",
        129,
    ),
    PracticeHint(
        "أَسْتَغْفِرُ اللهَ",
        "Astaghfirullāh",
        "I seek forgiveness from Allah",
        "Universal spiritual cleansing",
        70,
    ),
)


UNIVERSAL_DHIKR = PracticeHint(
    "صَلَاة عَلَى النَّبِي",
    "Ṣalawāt",
    "Blessings upon the Prophet ﷺ",
    "Always beneficial, opens spiritual doors",
    100,
)
