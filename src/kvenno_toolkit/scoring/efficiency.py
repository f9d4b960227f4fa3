"""Step-count efficiency scoring."""

from __future__ import annotations

from kvenno_toolkit.common.thresholds import SCORING_THRESHOLDS


def efficiency_score(steps_taken: int, optimal_steps: int) -> float:
    """
    Score how directly a problem was solved.

    Full marks at or under the optimal step count, then a fixed 10%
    deduction per extra step down to 0. With optimal_steps=5 the score
    reaches 0.0 at 15 steps.

    Args:
        steps_taken: Steps the student used
        optimal_steps: Steps in the model solution

    Returns:
        Score in [0, 1]

    Example:
        >>> efficiency_score(7, 5)
        0.8
    """
    if steps_taken <= optimal_steps:
        return 1.0

    extra_steps = steps_taken - optimal_steps
    penalty = extra_steps * SCORING_THRESHOLDS.efficiency_step_penalty
    return max(0.0, round(1 - penalty, SCORING_THRESHOLDS.rounding_digits))
