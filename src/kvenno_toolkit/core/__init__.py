"""
Kvenno Toolkit Core Package

Shared data models, validation and serialization used by the scoring and
export packages.

All models are frozen dataclasses: games build a config or progress record
once and pass it around; changes produce new instances.
"""

from .models import (
    ScoringConfig,
    DEFAULT_SCORING_CONFIG,
    default_scoring_config,
    GameProgress,
    LevelProgress,
    Level1Progress,
    Level2Progress,
    Level3Progress,
    ExportData,
    SummaryValue,
)
from .schemas import ValidationError

__all__ = [
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    "default_scoring_config",
    "GameProgress",
    "LevelProgress",
    "Level1Progress",
    "Level2Progress",
    "Level3Progress",
    "ExportData",
    "SummaryValue",
    "ValidationError",
]
