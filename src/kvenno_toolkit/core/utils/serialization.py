"""
Serialization Utilities

Provides to/from JSON utilities for the progress and export models.

- Clean separation: `serialize_*` and `deserialize_*` functions
- All models have `to_dict()` and `from_dict()` methods
- Validation via schemas before deserialization
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.export import ExportData
from ..models.progress import GameProgress
from ..schemas.validator import validate_export, validate_progress, ValidationError

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Progress Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_progress(progress: GameProgress) -> dict[str, Any]:
    """
    Serialize a GameProgress to a dictionary.

    Args:
        progress: GameProgress instance to serialize

    Returns:
        camelCase dictionary matching the game front-end format
    """
    return progress.to_dict()


def deserialize_progress(data: dict[str, Any], *, validate: bool = True) -> GameProgress:
    """
    Deserialize a GameProgress from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first

    Returns:
        GameProgress instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_progress(data)
    return GameProgress.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Export Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_export(export: ExportData) -> dict[str, Any]:
    """Serialize an ExportData to the exported JSON document shape."""
    return export.to_dict()


def deserialize_export(data: dict[str, Any], *, validate: bool = True) -> ExportData:
    """
    Deserialize an ExportData from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_export(data)
    return ExportData.from_dict(data)


def export_to_json(export: ExportData) -> str:
    """Render an export as pretty-printed JSON (2-space indent)."""
    return json.dumps(serialize_export(export), indent=2, ensure_ascii=False)


def load_export_json(path: Path, *, validate: bool = True) -> ExportData:
    """
    Load an exported progress document from disk.

    Args:
        path: Path to a *-progress-*.json file
        validate: Whether to validate before building the model

    Returns:
        ExportData instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Export file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON in {path.name}: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e

    logger.debug(f"Loaded export {path.name}")
    return deserialize_export(data, validate=validate)
