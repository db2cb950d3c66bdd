"""Configuration models and helpers for nujum settings."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LOG = logging.getLogger(__name__)

CONFIG_FILENAME = "settings.yaml"

__all__ = [
    "AlignmentCfg",
    "DignityCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
]


# -------------------- Settings Schema --------------------


class DignityCfg(BaseModel):
    """Essential dignity weights and the three-tier thresholds."""

    model_config = ConfigDict(frozen=True)

    class Weights(BaseModel):
        model_config = ConfigDict(frozen=True)

        exaltation: int = 5
        domicile: int = 5
        triplicity: int = 3
        term: int = 2
        face: int = 1
        peregrine: int = 0
        fall: int = -4
        detriment: int = -5
        retrograde: int = -2

        @field_validator("*", mode="before")
        @classmethod
        def _cap_weights(cls, value: int) -> int:
            return max(-10, min(10, int(value)))

    weights: Weights = Field(default_factory=Weights)
    # totalScore >= favorable_min is Favorable, <= cautious_max is Cautious.
    favorable_min: int = 5
    cautious_max: int = -4
    count_participating_triplicity: bool = False

    @model_validator(mode="after")
    def _check_thresholds(self) -> DignityCfg:
        if self.cautious_max >= self.favorable_min:
            raise ValueError("cautious_max must be lower than favorable_min")
        return self


class AlignmentCfg(BaseModel):
    """Harmony scores per alignment status and badge thresholds."""

    model_config = ConfigDict(frozen=True)

    act_score: int = 85
    maintain_score: int = 65
    hold_score: int = 40
    auspicious_min: int = 85
    proceed_min: int = 65
    neutral_min: int = 45
    cautious_min: int = 25

    @field_validator(
        "act_score",
        "maintain_score",
        "hold_score",
        "auspicious_min",
        "proceed_min",
        "neutral_min",
        "cautious_min",
        mode="before",
    )
    @classmethod
    def _cap_percent(cls, value: int) -> int:
        return max(0, min(100, int(value)))

    @model_validator(mode="after")
    def _check_badge_order(self) -> AlignmentCfg:
        if not self.auspicious_min > self.proceed_min > self.neutral_min > self.cautious_min:
            raise ValueError("badge thresholds must be strictly decreasing")
        return self


class Settings(BaseModel):
    """Top-level settings document."""

    model_config = ConfigDict(frozen=True)

    dignity: DignityCfg = Field(default_factory=DignityCfg)
    alignment: AlignmentCfg = Field(default_factory=AlignmentCfg)


# -------------------- Loading --------------------


def get_config_home() -> Path:
    """Return the directory where settings are looked up."""

    return Path(os.environ.get("NUJUM_HOME", str(Path.home() / ".nujum")))


def config_path() -> Path:
    return get_config_home() / CONFIG_FILENAME


@lru_cache(maxsize=1)
def default_settings() -> Settings:
    """Return the shared, immutable default settings."""

    return Settings()


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from YAML, falling back to defaults when no file exists.

    Nothing is written to disk.
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        LOG.debug("No settings file at %s; using defaults", source_path)
        return default_settings()
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring settings file %s: top level is not a mapping", source_path)
        raw = {}
    return Settings(**raw)
