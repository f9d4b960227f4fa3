"""
Scoring Package

Pure scoring functions shared by every game:

- composite: weighted composite score, pass/fail, average
- significant_figures: significant-figure counting on a number's text
- efficiency: step-count efficiency penalty
- explanation: keyword and length scoring of written explanations

All functions are stateless and never raise for malformed answers;
they degrade to a numeric default instead.
"""

from .composite import composite_score, is_passing, average
from .significant_figures import count_significant_figures, validate_significant_figures
from .efficiency import efficiency_score
from .explanation import ExplanationBreakdown, explanation_breakdown, score_explanation

__all__ = [
    # composite
    "composite_score",
    "is_passing",
    "average",
    # significant figures
    "count_significant_figures",
    "validate_significant_figures",
    # efficiency
    "efficiency_score",
    # explanation
    "ExplanationBreakdown",
    "explanation_breakdown",
    "score_explanation",
]
