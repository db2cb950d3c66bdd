"""Countdown formatting for the time remaining in a planetary hour."""

from __future__ import annotations

__all__ = ["format_countdown", "format_countdown_short"]


def _split(seconds: int) -> tuple[int, int, int]:
    total = max(0, int(seconds))
    return total // 3600, (total % 3600) // 60, total % 60


def format_countdown(seconds: int) -> str:
    """Return ``"1h 5m"``, ``"4m 10s"`` or ``"9s"`` style text."""

    hours, minutes, secs = _split(seconds)
    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def format_countdown_short(seconds: int) -> str:
    """Return ``H:MM:SS`` or ``M:SS`` text for badges."""

    if seconds <= 0:
        return "0:00"
    hours, minutes, secs = _split(seconds)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
