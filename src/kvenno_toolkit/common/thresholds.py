"""Centralized scoring constants.

This module contains the fixed rates, caps and length tiers used by the
scoring functions. The games depend on these exact values (for example the
efficiency score reaching 0.0 at ten extra steps), so they are contracts
rather than tuning knobs: no scoring function accepts them as parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScoringThresholds:
    """Constants for composite and efficiency scoring."""

    score_floor: float = 0.0  # Composite scores saturate at this value
    score_ceiling: float = 1.0  # ...and at this one
    efficiency_step_penalty: float = 0.1  # Deducted per step over optimal
    rounding_digits: int = 10  # Strips float drift from penalty arithmetic


@dataclass(frozen=True)
class ExplanationThresholds:
    """Constants for free-text explanation scoring."""

    default_min_length: int = 10  # Shorter explanations score exactly 0
    quality_weight_per_match: float = 0.15
    quality_cap: float = 0.3  # Caps at 2 quality keyword matches
    type_weight: float = 0.4  # Full credit when every type keyword appears
    # (minimum characters, bonus), checked longest first
    length_bonus_tiers: Tuple[Tuple[int, float], ...] = (
        (50, 0.3),
        (30, 0.2),
        (20, 0.1),
    )
    max_score: float = 1.0


# Global instances for easy import
SCORING_THRESHOLDS = ScoringThresholds()
EXPLANATION_THRESHOLDS = ExplanationThresholds()
