"""
Module: scoring.significant_figures

Purpose:
    Count significant figures in the text a student typed, and check the
    count against what a question expects.

Key Functions:
    - count_significant_figures(): Count on the textual form
    - validate_significant_figures(): Compare with an expected count

Counting rules (purely syntactic, the value is never parsed):
    1. Surrounding whitespace is ignored.
    2. Anything from an exponent marker (e/E) onwards is dropped;
       only the mantissa is counted.
    3. One leading "-" is dropped.
    4. Without a decimal point: leading zeros are stripped and every
       remaining character counts. "120" is 3, not "2 or 3".
    5. With a decimal point: the whole part counts without its leading
       zeros (an all-zero whole part counts 0) and EVERY fractional digit
       counts, so "0.00123" is 5 rather than the textbook 3.

Rules 4 and 5 differ from classroom significant-figure conventions.
Existing question banks were written against them, so they are kept
as-is; change them only together with the question content.
"""

from __future__ import annotations


def _mantissa(text: str) -> str:
    """Text before the first exponent marker, sign removed."""
    text = text.strip()
    lowered = text.lower()
    if "e" in lowered:
        text = text[:lowered.index("e")]
    if text.startswith("-"):
        text = text[1:]
    return text


def count_significant_figures(text: str) -> int:
    """
    Count significant figures in a numeric string.

    Args:
        text: Number as typed, e.g. "1.23e5" or "-0.050"

    Returns:
        Significant figure count (>= 0)

    Example:
        >>> count_significant_figures("1.23e5")
        3
        >>> count_significant_figures("0.00123")
        5
    """
    mantissa = _mantissa(text)

    if "." not in mantissa:
        return len(mantissa.lstrip("0"))

    parts = mantissa.split(".")
    whole, fractional = parts[0], parts[1]
    return len(whole.lstrip("0")) + len(fractional)


def validate_significant_figures(text: str, expected: int, tolerance: int = 0) -> bool:
    """
    Check that an answer has the expected number of significant figures.

    Args:
        text: Number as typed
        expected: Required significant figure count
        tolerance: Allowed difference either way

    Returns:
        True if |count - expected| <= tolerance
    """
    return abs(count_significant_figures(text) - expected) <= tolerance
