"""
Unit tests for ScoringConfig.
"""

import pytest

from kvenno_toolkit.core.models.scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
    default_scoring_config,
)


class TestScoringConfig:
    """Tests for ScoringConfig dataclass."""

    def test_default_when_created_then_standard_weights(self):
        config = default_scoring_config()
        assert config.weights == (0.4, 0.3, 0.2, 0.1)
        assert config.passing_threshold == 0.7

    def test_default_factory_when_called_then_returns_shared_constant(self):
        assert default_scoring_config() is DEFAULT_SCORING_CONFIG

    def test_weights_sum_when_default_then_one(self):
        assert DEFAULT_SCORING_CONFIG.weights_sum == 1.0

    def test_init_when_threshold_above_one_then_raises_error(self):
        with pytest.raises(ValueError, match="passing_threshold"):
            ScoringConfig(passing_threshold=1.5)

    def test_init_when_threshold_negative_then_raises_error(self):
        with pytest.raises(ValueError, match="passing_threshold"):
            ScoringConfig(passing_threshold=-0.1)

    def test_init_when_weights_do_not_sum_to_one_then_allowed(self):
        config = ScoringConfig(0.5, 0.5, 0.5, 0.5)
        assert config.weights_sum == 2.0

    def test_init_when_frozen_then_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_SCORING_CONFIG.passing_threshold = 0.1  # type: ignore

    def test_with_threshold_when_called_then_returns_copy(self):
        # Act
        lenient = DEFAULT_SCORING_CONFIG.with_threshold(0.5)

        # Assert
        assert lenient.passing_threshold == 0.5
        assert lenient.answer_weight == DEFAULT_SCORING_CONFIG.answer_weight
        assert DEFAULT_SCORING_CONFIG.passing_threshold == 0.7

    def test_with_threshold_when_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError):
            DEFAULT_SCORING_CONFIG.with_threshold(2.0)

    def test_to_dict_when_serialized_then_camel_case_keys(self):
        assert DEFAULT_SCORING_CONFIG.to_dict() == {
            "answerWeight": 0.4,
            "methodWeight": 0.3,
            "explanationWeight": 0.2,
            "efficiencyWeight": 0.1,
            "passingThreshold": 0.7,
        }

    def test_from_dict_when_partial_then_defaults_fill_in(self):
        config = ScoringConfig.from_dict({"answerWeight": 1.0, "passingThreshold": 0.5})
        assert config.answer_weight == 1.0
        assert config.method_weight == 0.3
        assert config.passing_threshold == 0.5
