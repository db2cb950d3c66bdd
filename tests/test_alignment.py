from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nujum.alignment import (
    AlignmentStatus,
    BadgeTier,
    alignment_for_hour,
    alignment_status,
    badge_for_score,
    harmony_score,
    score_alignment,
)
from nujum.config import AlignmentCfg
from nujum.engine.hours import planetary_hours
from nujum.errors import UnknownValueError
from nujum.reference import Element, Planet


def test_water_person_in_fire_hour_should_hold():
    result = alignment_for_hour(Element.WATER, Planet.MARS)

    assert result.time_element is Element.FIRE
    assert result.status is AlignmentStatus.HOLD
    assert result.score == 40
    assert result.badge.tier is BadgeTier.CAUTIOUS


def test_water_person_in_saturn_hour_is_complementary():
    result = alignment_for_hour("water", "saturn")

    assert result.time_element is Element.EARTH
    assert result.status is AlignmentStatus.MAINTAIN
    assert result.score == 65
    assert result.badge.tier is BadgeTier.PROCEED


def test_same_element_is_act(solar_day):
    mercury_hour = planetary_hours(solar_day)[1]
    result = alignment_for_hour(Element.AIR, mercury_hour)

    assert result.status is AlignmentStatus.ACT
    assert result.score == 85
    assert result.badge.tier is BadgeTier.AUSPICIOUS
    assert result.to_payload()["status"] == "ACT"


@pytest.mark.parametrize(
    ("user", "time", "status"),
    [
        (Element.FIRE, Element.AIR, AlignmentStatus.MAINTAIN),
        (Element.AIR, Element.FIRE, AlignmentStatus.MAINTAIN),
        (Element.EARTH, Element.WATER, AlignmentStatus.MAINTAIN),
        (Element.FIRE, Element.WATER, AlignmentStatus.HOLD),
        (Element.AIR, Element.EARTH, AlignmentStatus.HOLD),
        (Element.EARTH, Element.EARTH, AlignmentStatus.ACT),
    ],
)
def test_alignment_status_table(user, time, status):
    assert alignment_status(user, time) is status


@given(user=st.sampled_from(list(Element)), time=st.sampled_from(list(Element)))
def test_alignment_is_symmetric(user, time):
    assert alignment_status(user, time) is alignment_status(time, user)
    assert harmony_score(user, time) in {85, 65, 40}


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (100, BadgeTier.AUSPICIOUS),
        (85, BadgeTier.AUSPICIOUS),
        (84, BadgeTier.PROCEED),
        (65, BadgeTier.PROCEED),
        (45, BadgeTier.NEUTRAL),
        (25, BadgeTier.CAUTIOUS),
        (24, BadgeTier.INAUSPICIOUS),
        (0, BadgeTier.INAUSPICIOUS),
    ],
)
def test_badge_tiers(score, tier):
    badge = badge_for_score(score)

    assert badge.tier is tier
    assert badge.score == score
    assert badge.label_en


def test_configured_scores_are_used():
    cfg = AlignmentCfg(hold_score=50)
    result = score_alignment(Element.FIRE, Element.WATER, settings=cfg)

    assert result.score == 50
    assert result.badge.tier is BadgeTier.NEUTRAL


def test_unknown_element_is_rejected():
    with pytest.raises(UnknownValueError):
        score_alignment("aether", Element.FIRE)
