"""Exception hierarchy raised by the nujum calculators."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = [
    "NujumError",
    "InputError",
    "DegreeOutOfRangeError",
    "InvalidSolarDayError",
    "OutsideSolarDayError",
    "UnknownValueError",
]


class NujumError(Exception):
    """Base class for every error raised by this package."""


class InputError(NujumError, ValueError):
    """A caller supplied input that violates a calculator contract."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context or {})


class DegreeOutOfRangeError(InputError):
    """Degree within a sign outside ``[0, 30)`` or not a finite number."""


class InvalidSolarDayError(InputError):
    """Sunrise/sunset instants that cannot describe a solar day."""


class OutsideSolarDayError(InputError):
    """A reference instant that does not fall inside the supplied solar day."""


class UnknownValueError(InputError, KeyError):
    """A planet, sign, element or other enumerated name that is not recognised."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""
