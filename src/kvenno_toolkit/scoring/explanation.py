"""
Module: scoring.explanation

Purpose:
    Heuristic scoring of a student's free-text explanation from the
    keywords it mentions and its length.

Key Functions:
    - explanation_breakdown(): Per-component scores
    - score_explanation(): Total score in [0, 1]

Components:
    - quality: 0.15 per reasoning keyword ("because", "therefore"...),
      capped at 0.3
    - topic: fraction of the question's topic keywords present, x 0.4
    - length: 0.3 / 0.2 / 0.1 at 50 / 30 / 20 characters

Keyword matching is a case-insensitive substring test with no word
boundaries, so "on" matches inside "reaction". Question content is
tuned against this leniency.

Dependencies:
    - common.thresholds: EXPLANATION_THRESHOLDS

Used By:
    - game front-ends (level 1 explanations, level 3 composite input)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from kvenno_toolkit.common.thresholds import EXPLANATION_THRESHOLDS


@dataclass(frozen=True)
class ExplanationBreakdown:
    """
    Component scores for one explanation.

    Attributes:
        quality: Reasoning-keyword component (0 to 0.3)
        topic: Topic-keyword component (0 to 0.4)
        length: Length bonus (0 to 0.3)
        quality_matches: Number of quality keywords found
        topic_matches: Number of topic keywords found
    """

    quality: float = 0.0
    topic: float = 0.0
    length: float = 0.0
    quality_matches: int = 0
    topic_matches: int = 0

    @property
    def total(self) -> float:
        """Sum of the components, capped at 1.0."""
        return min(self.quality + self.topic + self.length, EXPLANATION_THRESHOLDS.max_score)


def _count_matches(text: str, keywords: Sequence[str]) -> int:
    return sum(1 for kw in keywords if kw.lower() in text)


def _length_bonus(length: int) -> float:
    for min_chars, bonus in EXPLANATION_THRESHOLDS.length_bonus_tiers:
        if length >= min_chars:
            return bonus
    return 0.0


def explanation_breakdown(
    explanation_text: str,
    quality_keywords: Sequence[str],
    type_keywords: Sequence[str],
    min_length: int = EXPLANATION_THRESHOLDS.default_min_length,
) -> ExplanationBreakdown:
    """
    Score each component of an explanation.

    Text shorter than min_length (after trimming) gets an all-zero
    breakdown; there is no partial credit below the cutoff.

    Args:
        explanation_text: The student's explanation
        quality_keywords: Reasoning words the game rewards
        type_keywords: Topic words for this question
        min_length: Minimum trimmed length to be scored at all

    Returns:
        ExplanationBreakdown
    """
    text = explanation_text.lower().strip()
    if len(text) < min_length:
        return ExplanationBreakdown()

    quality_matches = _count_matches(text, quality_keywords)
    topic_matches = _count_matches(text, type_keywords)

    return ExplanationBreakdown(
        quality=min(
            quality_matches * EXPLANATION_THRESHOLDS.quality_weight_per_match,
            EXPLANATION_THRESHOLDS.quality_cap,
        ),
        topic=(topic_matches / max(len(type_keywords), 1)) * EXPLANATION_THRESHOLDS.type_weight,
        length=_length_bonus(len(text)),
        quality_matches=quality_matches,
        topic_matches=topic_matches,
    )


def score_explanation(
    explanation_text: str,
    quality_keywords: Sequence[str],
    type_keywords: Sequence[str],
    min_length: int = EXPLANATION_THRESHOLDS.default_min_length,
) -> float:
    """
    Score an explanation in [0, 1].

    Example:
        >>> score_explanation("short", ["because"], ["molarity"])
        0.0
    """
    return explanation_breakdown(
        explanation_text, quality_keywords, type_keywords, min_length
    ).total
