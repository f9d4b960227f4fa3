"""
Schemas Package

Payload validation for progress and export documents.
"""

from .validator import (
    validate_progress,
    validate_level_progress,
    validate_summary,
    validate_export,
    ValidationError,
)

__all__ = [
    "validate_progress",
    "validate_level_progress",
    "validate_summary",
    "validate_export",
    "ValidationError",
]
