from __future__ import annotations

import pytest

from nujum.engine.hours import format_countdown, format_countdown_short


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(3900, "1h 5m"), (250, "4m 10s"), (9, "9s"), (0, "0s"), (-12, "0s"), (7200, "2h 0m")],
)
def test_format_countdown(seconds, expected):
    assert format_countdown(seconds) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(3723, "1:02:03"), (250, "4:10"), (9, "0:09"), (0, "0:00"), (-5, "0:00")],
)
def test_format_countdown_short(seconds, expected):
    assert format_countdown_short(seconds) == expected
