"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    ScoringThresholds,
    ExplanationThresholds,
    SCORING_THRESHOLDS,
    EXPLANATION_THRESHOLDS,
)
from .file_locking import locked_file, locked_write_text

__all__ = [
    # thresholds
    "ScoringThresholds",
    "ExplanationThresholds",
    "SCORING_THRESHOLDS",
    "EXPLANATION_THRESHOLDS",
    # file locking
    "locked_file",
    "locked_write_text",
]
