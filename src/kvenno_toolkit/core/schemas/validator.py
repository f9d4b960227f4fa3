"""
Schema Validation Utilities

Validates progress and export payloads before they become models.

Exported files are read back by teachers' tools and re-imported into the
games, so a malformed payload fails fast here with a ValidationError that
names the offending field path, instead of surfacing later as a KeyError
or a silently wrong summary.
"""

from __future__ import annotations

from typing import Any

from ..models.export import SUMMARY_VALUE_TYPES
from ..models.progress import VALID_LEVELS


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid counter
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_fields(data: dict[str, Any], required: list[str], path: str) -> None:
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )


def _validate_counters(data: dict[str, Any], names: list[str], path: str) -> None:
    for name in names:
        if name not in data:
            continue
        value = data[name]
        if not _is_int(value) or value < 0:
            raise ValidationError(
                f"{name} must be a non-negative integer, got {value!r}",
                path=f"{path}.{name}" if path else name,
            )


def _validate_number_list(data: dict[str, Any], name: str, path: str) -> None:
    if name not in data:
        return
    values = data[name]
    if not isinstance(values, list):
        raise ValidationError(f"{name} must be a list", path=f"{path}.{name}")
    bad = [i for i, v in enumerate(values) if not _is_number(v)]
    if bad:
        raise ValidationError(
            f"{name} must contain only numbers",
            path=f"{path}.{name}",
            errors=[f"{name}[{i}] is not a number" for i in bad],
        )


def _validate_mastered(data: dict[str, Any], path: str) -> None:
    if "mastered" in data and not isinstance(data["mastered"], bool):
        raise ValidationError("mastered must be a boolean", path=f"{path}.mastered")


def validate_level_progress(data: dict[str, Any], *, path: str = "levelProgress") -> None:
    """
    Validate the per-level section of a progress payload.

    Args:
        data: levelProgress dictionary
        path: Field path used in error messages

    Raises:
        ValidationError: If any level record is malformed
    """
    if not isinstance(data, dict):
        raise ValidationError("levelProgress must be an object", path=path)

    unknown = [k for k in data if k not in ("level1", "level2", "level3")]
    if unknown:
        raise ValidationError(
            f"Unknown levels: {unknown}",
            path=path,
            errors=[f"Unknown level: {k}" for k in unknown],
        )

    for name, level in data.items():
        if level is not None and not isinstance(level, dict):
            raise ValidationError(f"{name} must be an object", path=f"{path}.{name}")

    level1 = data.get("level1")
    if level1 is not None:
        _validate_counters(
            level1,
            ["questionsAnswered", "questionsCorrect", "explanationsProvided"],
            f"{path}.level1",
        )
        _validate_number_list(level1, "explanationScores", f"{path}.level1")
        _validate_mastered(level1, f"{path}.level1")

    level2 = data.get("level2")
    if level2 is not None:
        _validate_counters(
            level2,
            ["problemsCompleted", "predictionsMade", "predictionsCorrect", "finalAnswersCorrect"],
            f"{path}.level2",
        )
        _validate_mastered(level2, f"{path}.level2")

    level3 = data.get("level3")
    if level3 is not None:
        _validate_counters(level3, ["problemsCompleted", "hintsUsed"], f"{path}.level3")
        _validate_number_list(level3, "compositeScores", f"{path}.level3")
        achievements = level3.get("achievements", [])
        if not isinstance(achievements, list) or not all(isinstance(a, str) for a in achievements):
            raise ValidationError(
                "achievements must be a list of strings",
                path=f"{path}.level3.achievements",
            )
        _validate_mastered(level3, f"{path}.level3")


def validate_progress(data: dict[str, Any], *, path: str = "") -> None:
    """
    Validate a GameProgress payload (camelCase front-end format).

    Args:
        data: Progress dictionary to validate
        path: Prefix for field paths in error messages

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Progress must be an object", path=path)

    _require_fields(data, ["currentLevel", "problemsCompleted"], path)

    level = data["currentLevel"]
    if not _is_int(level) or level not in VALID_LEVELS:
        raise ValidationError(
            f"Invalid currentLevel: {level!r} (must be one of {VALID_LEVELS})",
            path=f"{path}.currentLevel" if path else "currentLevel",
        )

    _validate_counters(data, ["problemsCompleted"], path)

    # Seconds may be fractional
    if "totalTimeSpent" in data:
        seconds = data["totalTimeSpent"]
        if not _is_number(seconds) or seconds < 0:
            raise ValidationError(
                f"totalTimeSpent must be a non-negative number, got {seconds!r}",
                path=f"{path}.totalTimeSpent" if path else "totalTimeSpent",
            )

    if "lastPlayedDate" in data and not isinstance(data["lastPlayedDate"], str):
        raise ValidationError(
            "lastPlayedDate must be a string",
            path=f"{path}.lastPlayedDate" if path else "lastPlayedDate",
        )

    if "levelProgress" in data:
        validate_level_progress(
            data["levelProgress"],
            path=f"{path}.levelProgress" if path else "levelProgress",
        )


def validate_summary(summary: Any, *, path: str = "summary") -> None:
    """
    Validate an export summary map.

    Raises:
        ValidationError: If summary is not a string-keyed map of scalars
    """
    if not isinstance(summary, dict):
        raise ValidationError("summary must be an object", path=path)

    errors = []
    for key, value in summary.items():
        if not isinstance(key, str):
            errors.append(f"Key {key!r} is not a string")
        elif not isinstance(value, SUMMARY_VALUE_TYPES):
            errors.append(f"{key}: unsupported value type {type(value).__name__}")
    if errors:
        raise ValidationError(
            f"Invalid summary values: {len(errors)} problem(s)",
            path=path,
            errors=errors,
        )


def validate_export(data: dict[str, Any]) -> None:
    """
    Validate an exported progress document.

    Args:
        data: Export dictionary to validate

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Export must be an object")

    _require_fields(
        data,
        ["exportTimestamp", "gameName", "gameVersion", "studentProgress", "summary"],
        "",
    )

    for name in ("exportTimestamp", "gameName", "gameVersion"):
        if not isinstance(data[name], str) or not data[name]:
            raise ValidationError(f"{name} must be a non-empty string", path=name)

    validate_progress(data["studentProgress"], path="studentProgress")
    validate_summary(data["summary"])
