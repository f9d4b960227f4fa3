"""
Module: progress

Purpose:
    Provides the student progress records kept by each game: overall
    progress plus optional per-level detail for the three game levels.

Key Functions:
    - GameProgress.from_dict(data): Parse the front-end camelCase payload
    - GameProgress.to_dict(): Serialize back to the same shape
    - Level1Progress.accuracy / Level3Progress.average_composite

Dependencies:
    - dataclasses (std)
    - scoring.composite.average (imported lazily)

Used By:
    - core.utils.serialization
    - export.writer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

VALID_LEVELS = (0, 1, 2, 3)


def _check_non_negative(record: str, **counters: int) -> None:
    for name, value in counters.items():
        if value < 0:
            raise ValueError(f"{record}.{name} cannot be negative: {value}")


@dataclass(frozen=True)
class Level1Progress:
    """
    Conceptual level: multiple choice questions with written explanations.

    Attributes:
        questions_answered: Questions attempted
        questions_correct: Questions answered correctly
        explanations_provided: Explanations submitted
        explanation_scores: Score for each explanation, in submission order
        mastered: Whether the level has been mastered
    """

    questions_answered: int = 0
    questions_correct: int = 0
    explanations_provided: int = 0
    explanation_scores: Tuple[float, ...] = ()
    mastered: bool = False

    def __post_init__(self) -> None:
        _check_non_negative(
            "Level1Progress",
            questions_answered=self.questions_answered,
            questions_correct=self.questions_correct,
            explanations_provided=self.explanations_provided,
        )

    @property
    def accuracy(self) -> float:
        """Fraction of answered questions that were correct (0 when none answered)."""
        if self.questions_answered == 0:
            return 0.0
        return self.questions_correct / self.questions_answered

    def to_dict(self) -> dict[str, Any]:
        return {
            "questionsAnswered": self.questions_answered,
            "questionsCorrect": self.questions_correct,
            "explanationsProvided": self.explanations_provided,
            "explanationScores": list(self.explanation_scores),
            "mastered": self.mastered,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Level1Progress:
        return cls(
            questions_answered=data.get("questionsAnswered", 0),
            questions_correct=data.get("questionsCorrect", 0),
            explanations_provided=data.get("explanationsProvided", 0),
            explanation_scores=tuple(data.get("explanationScores", [])),
            mastered=data.get("mastered", False),
        )


@dataclass(frozen=True)
class Level2Progress:
    """Guided level: predictions checked before the final answer."""

    problems_completed: int = 0
    predictions_made: int = 0
    predictions_correct: int = 0
    final_answers_correct: int = 0
    mastered: bool = False

    def __post_init__(self) -> None:
        _check_non_negative(
            "Level2Progress",
            problems_completed=self.problems_completed,
            predictions_made=self.predictions_made,
            predictions_correct=self.predictions_correct,
            final_answers_correct=self.final_answers_correct,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "problemsCompleted": self.problems_completed,
            "predictionsMade": self.predictions_made,
            "predictionsCorrect": self.predictions_correct,
            "finalAnswersCorrect": self.final_answers_correct,
            "mastered": self.mastered,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Level2Progress:
        return cls(
            problems_completed=data.get("problemsCompleted", 0),
            predictions_made=data.get("predictionsMade", 0),
            predictions_correct=data.get("predictionsCorrect", 0),
            final_answers_correct=data.get("finalAnswersCorrect", 0),
            mastered=data.get("mastered", False),
        )


@dataclass(frozen=True)
class Level3Progress:
    """
    Open problem level, graded with composite scores.

    Attributes:
        problems_completed: Problems finished
        composite_scores: Composite score per finished problem
        achievements: Achievement ids earned on this level
        mastered: Whether the level has been mastered
        hints_used: Number of hints revealed
    """

    problems_completed: int = 0
    composite_scores: Tuple[float, ...] = ()
    achievements: Tuple[str, ...] = ()
    mastered: bool = False
    hints_used: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(
            "Level3Progress",
            problems_completed=self.problems_completed,
            hints_used=self.hints_used,
        )

    @property
    def average_composite(self) -> float:
        """Mean composite score; 0 when no problems were scored."""
        from kvenno_toolkit.scoring.composite import average

        return average(self.composite_scores)

    def to_dict(self) -> dict[str, Any]:
        return {
            "problemsCompleted": self.problems_completed,
            "compositeScores": list(self.composite_scores),
            "achievements": list(self.achievements),
            "mastered": self.mastered,
            "hintsUsed": self.hints_used,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Level3Progress:
        return cls(
            problems_completed=data.get("problemsCompleted", 0),
            composite_scores=tuple(data.get("compositeScores", [])),
            achievements=tuple(data.get("achievements", [])),
            mastered=data.get("mastered", False),
            hints_used=data.get("hintsUsed", 0),
        )


@dataclass(frozen=True)
class LevelProgress:
    """Per-level detail; a level is None until the student reaches it."""

    level1: Optional[Level1Progress] = None
    level2: Optional[Level2Progress] = None
    level3: Optional[Level3Progress] = None

    def to_dict(self) -> dict[str, Any]:
        # Unvisited levels are omitted rather than written as null
        result: dict[str, Any] = {}
        if self.level1 is not None:
            result["level1"] = self.level1.to_dict()
        if self.level2 is not None:
            result["level2"] = self.level2.to_dict()
        if self.level3 is not None:
            result["level3"] = self.level3.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LevelProgress:
        return cls(
            level1=Level1Progress.from_dict(data["level1"]) if data.get("level1") is not None else None,
            level2=Level2Progress.from_dict(data["level2"]) if data.get("level2") is not None else None,
            level3=Level3Progress.from_dict(data["level3"]) if data.get("level3") is not None else None,
        )


@dataclass(frozen=True)
class GameProgress:
    """
    A student's progress in one game.

    Attributes:
        current_level: Level being played (0 = not started, 1-3)
        problems_completed: Problems finished across all levels
        last_played_date: ISO-8601 timestamp of the last session
        total_time_spent: Seconds spent in the game
        level_progress: Per-level detail

    Invariants:
        - current_level in (0, 1, 2, 3)
        - problems_completed >= 0
        - total_time_spent >= 0

    Example:
        >>> progress = GameProgress(current_level=1, problems_completed=3)
        >>> progress.level_progress.level1 is None
        True
    """

    current_level: int = 0
    problems_completed: int = 0
    last_played_date: str = ""
    total_time_spent: float = 0
    level_progress: LevelProgress = field(default_factory=LevelProgress)

    def __post_init__(self) -> None:
        """Validate progress on construction."""
        if self.current_level not in VALID_LEVELS:
            raise ValueError(f"Invalid current_level: {self.current_level}")
        _check_non_negative(
            "GameProgress",
            problems_completed=self.problems_completed,
            total_time_spent=self.total_time_spent,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentLevel": self.current_level,
            "problemsCompleted": self.problems_completed,
            "lastPlayedDate": self.last_played_date,
            "totalTimeSpent": self.total_time_spent,
            "levelProgress": self.level_progress.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameProgress:
        return cls(
            current_level=data["currentLevel"],
            problems_completed=data["problemsCompleted"],
            last_played_date=data.get("lastPlayedDate", ""),
            total_time_spent=data.get("totalTimeSpent", 0),
            level_progress=LevelProgress.from_dict(data.get("levelProgress", {})),
        )
