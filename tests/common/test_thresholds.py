"""Tests for the scoring constants."""

import pytest

from kvenno_toolkit.common.thresholds import EXPLANATION_THRESHOLDS, SCORING_THRESHOLDS


class TestThresholds:
    """The games depend on these exact values."""

    def test_efficiency_penalty_is_ten_percent(self):
        assert SCORING_THRESHOLDS.efficiency_step_penalty == 0.1

    def test_length_tiers_are_longest_first(self):
        lengths = [min_chars for min_chars, _ in EXPLANATION_THRESHOLDS.length_bonus_tiers]
        assert lengths == sorted(lengths, reverse=True)

    def test_explanation_components_sum_to_one(self):
        top_length_bonus = EXPLANATION_THRESHOLDS.length_bonus_tiers[0][1]
        total = EXPLANATION_THRESHOLDS.quality_cap + EXPLANATION_THRESHOLDS.type_weight + top_length_bonus
        assert total == pytest.approx(1.0)

    def test_thresholds_are_frozen(self):
        with pytest.raises(AttributeError):
            SCORING_THRESHOLDS.efficiency_step_penalty = 0.2  # type: ignore
