"""
Module: scoring_config

Purpose:
    Provides the ScoringConfig dataclass - the per-game weighting and
    pass mark used to turn component scores into a composite verdict.

Key Functions:
    - ScoringConfig.with_threshold(value): Copy with a new pass mark
    - ScoringConfig.weights_sum: Sum of the four component weights
    - default_scoring_config(): Factory for the standard weighting

Dependencies:
    - dataclasses (std)

Used By:
    - scoring.composite
    - export.writer (summary fields)

Design Note:
    The default weighting is a frozen constant plus a factory. Games
    build their own config once and pass it explicitly; nothing in the
    toolkit mutates a shared module-level object.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """
    Weights and pass mark for composite scoring (immutable).

    Attributes:
        answer_weight: Weight of the final-answer correctness score
        method_weight: Weight of the working/method score
        explanation_weight: Weight of the free-text explanation score
        efficiency_weight: Weight of the step-efficiency score
        passing_threshold: Minimum composite score that counts as a pass

    Invariants:
        - 0 <= passing_threshold <= 1
        - weights are expected to sum to 1.0 but this is NOT enforced;
          composite scores are clamped to [0, 1] regardless

    Example:
        >>> config = ScoringConfig(0.5, 0.5, 0.0, 0.0, passing_threshold=0.6)
        >>> config.weights_sum
        1.0
    """

    answer_weight: float = 0.4
    method_weight: float = 0.3
    explanation_weight: float = 0.2
    efficiency_weight: float = 0.1
    passing_threshold: float = 0.7

    def __post_init__(self) -> None:
        """Validate config on construction."""
        if not 0.0 <= self.passing_threshold <= 1.0:
            raise ValueError(
                f"passing_threshold must be within [0, 1]: {self.passing_threshold}"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def weights(self) -> tuple[float, float, float, float]:
        """Component weights in (answer, method, explanation, efficiency) order."""
        return (
            self.answer_weight,
            self.method_weight,
            self.explanation_weight,
            self.efficiency_weight,
        )

    @property
    def weights_sum(self) -> float:
        """Sum of the four component weights."""
        return round(sum(self.weights), 10)

    def with_threshold(self, passing_threshold: float) -> ScoringConfig:
        """
        Copy this config with a different pass mark.

        Args:
            passing_threshold: New threshold in [0, 1]

        Returns:
            New ScoringConfig; the original is unchanged
        """
        return replace(self, passing_threshold=passing_threshold)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, float]:
        """Serialize using the camelCase keys of the game front-ends."""
        return {
            "answerWeight": self.answer_weight,
            "methodWeight": self.method_weight,
            "explanationWeight": self.explanation_weight,
            "efficiencyWeight": self.efficiency_weight,
            "passingThreshold": self.passing_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict[str, float]) -> ScoringConfig:
        """Deserialize from a camelCase dictionary; missing keys take defaults."""
        defaults = cls()
        return cls(
            answer_weight=data.get("answerWeight", defaults.answer_weight),
            method_weight=data.get("methodWeight", defaults.method_weight),
            explanation_weight=data.get("explanationWeight", defaults.explanation_weight),
            efficiency_weight=data.get("efficiencyWeight", defaults.efficiency_weight),
            passing_threshold=data.get("passingThreshold", defaults.passing_threshold),
        )


DEFAULT_SCORING_CONFIG = ScoringConfig()


def default_scoring_config() -> ScoringConfig:
    """Return the standard 40/30/20/10 weighting with a 0.7 pass mark."""
    return DEFAULT_SCORING_CONFIG
