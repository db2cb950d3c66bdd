"""Configuration helpers exposed at :mod:`nujum.config`."""

from __future__ import annotations

from .settings import (
    AlignmentCfg,
    DignityCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
)

__all__ = [
    "AlignmentCfg",
    "DignityCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
]
