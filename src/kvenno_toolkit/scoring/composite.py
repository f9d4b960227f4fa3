"""
Module: scoring.composite

Purpose:
    Combine the four component scores of a problem into one composite
    score in [0, 1] and decide whether it passes.

Key Functions:
    - composite_score(): Weighted sum, clamped to [0, 1]
    - is_passing(): Inclusive threshold check
    - average(): Arithmetic mean with a 0 default for no scores

Dependencies:
    - math (std)
    - core.models.scoring_config: ScoringConfig

Used By:
    - core.models.progress: Level3Progress.average_composite
    - game front-ends (level 3 grading)
"""

from __future__ import annotations

import math
from typing import Iterable

from kvenno_toolkit.common.thresholds import SCORING_THRESHOLDS
from kvenno_toolkit.core.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig


def composite_score(
    answer: float,
    method: float,
    explanation: float,
    efficiency: float,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """
    Weighted composite of the four component scores.

    Out-of-range results are saturated, not rejected: components of 2.0
    give 1.0 and components of -1 give 0.0.

    Args:
        answer: Final-answer correctness score
        method: Working/method score
        explanation: Explanation quality score
        efficiency: Step efficiency score
        config: Weights to apply

    Returns:
        Composite score in [0, 1]

    Example:
        >>> composite_score(0.5, 0.5, 0.5, 0.5)
        0.5
    """
    components = (answer, method, explanation, efficiency)
    # fsum keeps 0.4 + 0.3 + 0.2 + 0.1 exactly 1.0
    total = math.fsum(c * w for c, w in zip(components, config.weights))
    return max(SCORING_THRESHOLDS.score_floor, min(SCORING_THRESHOLDS.score_ceiling, total))


def is_passing(score: float, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> bool:
    """True if score meets the config's passing threshold (inclusive)."""
    return score >= config.passing_threshold


def average(scores: Iterable[float]) -> float:
    """
    Arithmetic mean of scores.

    Returns 0 for no scores. Callers that need to tell "no data" apart
    from "all zero" must check for emptiness themselves.
    """
    values = list(scores)
    if not values:
        return 0
    return math.fsum(values) / len(values)
