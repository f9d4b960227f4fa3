"""Display formatting for progress summaries."""

from __future__ import annotations

import math


def format_time_spent(seconds: int) -> str:
    """Format seconds as e.g. '1h 1m', '2m 5s' or '45s'.

    Args:
        seconds: Elapsed time in seconds.

    Returns:
        Hours and minutes when over an hour, minutes and seconds when
        over a minute, otherwise seconds only.
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def calculate_percentage(correct: float, total: float) -> int:
    """Percentage of correct out of total, rounded half up (0 when total is 0).

    Args:
        correct: Number correct (may be fractional, e.g. half marks).
        total: Number possible.

    Returns:
        Whole-number percentage.
    """
    if total == 0:
        return 0
    # Half up, not Python's banker's rounding: 0.5% -> 1%
    return math.floor(correct / total * 100 + 0.5)
