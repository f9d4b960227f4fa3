"""
Unit Tests for Progress Schema Validation
"""

import pytest

from kvenno_toolkit.core.schemas.validator import (
    validate_export,
    validate_progress,
    validate_summary,
    ValidationError,
)


@pytest.fixture
def valid_export_data(sample_progress_dict) -> dict:
    return {
        "exportTimestamp": "2024-01-15T10:30:00.000Z",
        "gameName": "Molmassi",
        "gameVersion": "1.0.0",
        "studentProgress": sample_progress_dict,
        "summary": {"totalScore": 90, "averageTime": 60.5, "mastered": True, "grade": "A"},
    }


class TestValidateProgress:
    """Tests for validate_progress function."""

    def test_valid_progress_passes(self, sample_progress_dict):
        validate_progress(sample_progress_dict)  # Should not raise

    def test_missing_required_field_fails(self, sample_progress_dict):
        del sample_progress_dict["currentLevel"]
        with pytest.raises(ValidationError, match="Missing required fields") as exc:
            validate_progress(sample_progress_dict)
        assert exc.value.errors == ["Missing field: currentLevel"]

    def test_invalid_level_fails(self, sample_progress_dict):
        sample_progress_dict["currentLevel"] = 7
        with pytest.raises(ValidationError, match="Invalid currentLevel") as exc:
            validate_progress(sample_progress_dict)
        assert exc.value.path == "currentLevel"

    def test_bool_counter_fails(self, sample_progress_dict):
        sample_progress_dict["problemsCompleted"] = True
        with pytest.raises(ValidationError, match="problemsCompleted"):
            validate_progress(sample_progress_dict)

    def test_negative_level_counter_reports_nested_path(self, sample_progress_dict):
        sample_progress_dict["levelProgress"]["level1"]["questionsCorrect"] = -1
        with pytest.raises(ValidationError) as exc:
            validate_progress(sample_progress_dict)
        assert exc.value.path == "levelProgress.level1.questionsCorrect"

    def test_non_numeric_scores_fail(self, sample_progress_dict):
        sample_progress_dict["levelProgress"]["level1"]["explanationScores"] = [0.5, "high"]
        with pytest.raises(ValidationError) as exc:
            validate_progress(sample_progress_dict)
        assert exc.value.errors == ["explanationScores[1] is not a number"]

    def test_unknown_level_fails(self, sample_progress_dict):
        sample_progress_dict["levelProgress"]["level4"] = {}
        with pytest.raises(ValidationError, match="Unknown levels"):
            validate_progress(sample_progress_dict)

    def test_level_not_object_fails(self, sample_progress_dict):
        sample_progress_dict["levelProgress"]["level2"] = [1, 2]
        with pytest.raises(ValidationError, match="level2 must be an object"):
            validate_progress(sample_progress_dict)

    def test_fractional_time_spent_passes(self, sample_progress_dict):
        sample_progress_dict["totalTimeSpent"] = 12.5
        validate_progress(sample_progress_dict)  # Should not raise

    def test_negative_time_spent_fails(self, sample_progress_dict):
        sample_progress_dict["totalTimeSpent"] = -0.5
        with pytest.raises(ValidationError, match="non-negative number") as exc:
            validate_progress(sample_progress_dict)
        assert exc.value.path == "totalTimeSpent"

    def test_bool_time_spent_fails(self, sample_progress_dict):
        sample_progress_dict["totalTimeSpent"] = True
        with pytest.raises(ValidationError, match="totalTimeSpent"):
            validate_progress(sample_progress_dict)

    def test_level3_achievements_must_be_strings(self, sample_progress_dict):
        sample_progress_dict["levelProgress"]["level3"] = {"achievements": [1]}
        with pytest.raises(ValidationError, match="achievements"):
            validate_progress(sample_progress_dict)


class TestValidateSummary:
    """Tests for validate_summary function."""

    def test_scalar_values_pass(self):
        validate_summary({"a": "x", "b": 1, "c": 1.5, "d": False})

    def test_nested_value_fails(self):
        with pytest.raises(ValidationError) as exc:
            validate_summary({"scores": [1, 2], "extra": None})
        assert len(exc.value.errors) == 2

    def test_not_a_mapping_fails(self):
        with pytest.raises(ValidationError, match="summary must be an object"):
            validate_summary(["a"])


class TestValidateExport:
    """Tests for validate_export function."""

    def test_valid_export_passes(self, valid_export_data):
        validate_export(valid_export_data)  # Should not raise

    def test_missing_summary_fails(self, valid_export_data):
        del valid_export_data["summary"]
        with pytest.raises(ValidationError, match="Missing required fields"):
            validate_export(valid_export_data)

    def test_empty_game_name_fails(self, valid_export_data):
        valid_export_data["gameName"] = ""
        with pytest.raises(ValidationError, match="gameName"):
            validate_export(valid_export_data)

    def test_invalid_student_progress_reports_prefixed_path(self, valid_export_data):
        valid_export_data["studentProgress"]["currentLevel"] = -1
        with pytest.raises(ValidationError) as exc:
            validate_export(valid_export_data)
        assert exc.value.path == "studentProgress.currentLevel"
