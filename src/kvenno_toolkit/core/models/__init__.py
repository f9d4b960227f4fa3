"""
Core Models Package

Immutable data models for scoring configuration, student progress and
progress exports.
"""

from .scoring_config import ScoringConfig, DEFAULT_SCORING_CONFIG, default_scoring_config
from .progress import GameProgress, LevelProgress, Level1Progress, Level2Progress, Level3Progress
from .export import ExportData, SummaryValue

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
]
