import logging
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import kvenno_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from kvenno_toolkit.core.models.progress import (  # noqa: E402
    GameProgress,
    Level1Progress,
    Level3Progress,
    LevelProgress,
)


# Common test fixtures
@pytest.fixture
def sample_progress() -> GameProgress:
    """Progress for a student part-way through a game."""
    return GameProgress(
        current_level=2,
        problems_completed=15,
        last_played_date="2024-01-15T10:30:00Z",
        total_time_spent=1200,
        level_progress=LevelProgress(
            level1=Level1Progress(
                questions_answered=10,
                questions_correct=9,
                explanations_provided=5,
                explanation_scores=(0.9, 0.88, 0.92),
                mastered=True,
            ),
        ),
    )


@pytest.fixture
def sample_progress_dict() -> dict:
    """The same progress in the front-end camelCase format."""
    return {
        "currentLevel": 2,
        "problemsCompleted": 15,
        "lastPlayedDate": "2024-01-15T10:30:00Z",
        "totalTimeSpent": 1200,
        "levelProgress": {
            "level1": {
                "questionsAnswered": 10,
                "questionsCorrect": 9,
                "explanationsProvided": 5,
                "explanationScores": [0.9, 0.88, 0.92],
                "mastered": True,
            },
        },
    }


@pytest.fixture
def level3_progress() -> Level3Progress:
    return Level3Progress(
        problems_completed=3,
        composite_scores=(0.6, 0.8, 1.0),
        achievements=("streak-3",),
        hints_used=2,
    )


@pytest.fixture
def capture_export_logs(caplog):
    caplog.set_level(logging.INFO, logger="kvenno_toolkit")
    return caplog
