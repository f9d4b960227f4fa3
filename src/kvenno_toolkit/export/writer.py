"""
Module: export.writer

Purpose:
    Write a student's progress to disk as JSON (full snapshot) or CSV
    (one row per problem/attempt) for teachers to collect.

Key Functions:
    - build_export_data(): Assemble an ExportData with a UTC timestamp
    - export_progress_json(): Write <game_id>-progress-<date>.json
    - export_progress_csv(): Write <game_id>-progress-<date>.csv

Dependencies:
    - csv (std)
    - common.file_locking: Exclusive-lock file writes (portalocker)
    - core.schemas.validator: Payload validation before writing
    - core.utils.serialization: JSON rendering

Used By:
    - game front-ends: "Export progress" action
"""

from __future__ import annotations

import csv
import io
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from kvenno_toolkit.common.file_locking import locked_write_text
from kvenno_toolkit.core.models.export import ExportData, SummaryValue
from kvenno_toolkit.core.models.progress import GameProgress
from kvenno_toolkit.core.schemas.validator import validate_export
from kvenno_toolkit.core.utils.serialization import export_to_json, serialize_export

logger = logging.getLogger(__name__)

CsvRow = Mapping[str, Union[str, int, float]]


def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _iso_timestamp(now: datetime) -> str:
    """ISO-8601 with milliseconds and a Z suffix, e.g. 2024-01-15T10:30:00.000Z."""
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_filename(game_id: str, extension: str, now: Optional[datetime] = None) -> str:
    """
    Build the export file name for a game.

    Args:
        game_id: Game identifier, e.g. "molmassi"
        extension: "json" or "csv"
        now: Export time (defaults to current UTC time)

    Returns:
        "<game_id>-progress-<YYYY-MM-DD>.<extension>"
    """
    date = _utc_now(now).date().isoformat()
    return f"{game_id}-progress-{date}.{extension}"


def build_export_data(
    game_name: str,
    game_version: str,
    progress: GameProgress,
    summary: Mapping[str, SummaryValue],
    now: Optional[datetime] = None,
) -> ExportData:
    """
    Assemble an export snapshot.

    Args:
        game_name: Display name of the game
        game_version: Game version string
        progress: Progress to export
        summary: Game-defined summary values
        now: Export time (defaults to current UTC time)

    Returns:
        ExportData stamped with the export time

    Raises:
        TypeError: If a summary value is not str, int, float or bool
    """
    return ExportData(
        export_timestamp=_iso_timestamp(_utc_now(now)),
        game_name=game_name,
        game_version=game_version,
        student_progress=progress,
        summary=summary,
    )


def export_progress_json(
    game_id: str,
    game_name: str,
    game_version: str,
    progress: GameProgress,
    summary: Mapping[str, SummaryValue],
    output_dir: Path,
    *,
    now: Optional[datetime] = None,
) -> Path:
    """
    Export a progress snapshot as pretty-printed JSON.

    Args:
        game_id: Game identifier used in the file name
        game_name: Display name of the game
        game_version: Game version string
        progress: Progress to export
        summary: Game-defined summary values
        output_dir: Directory to write into (created if missing)
        now: Export time (defaults to current UTC time)

    Returns:
        Path to the written file

    Raises:
        ValidationError: If the assembled document is invalid
        OSError: If the file cannot be written
    """
    now = _utc_now(now)
    export = build_export_data(game_name, game_version, progress, summary, now)
    validate_export(serialize_export(export))

    output_path = output_dir / export_filename(game_id, "json", now)
    logger.info(f"Exporting {game_id} progress to {output_path}")
    locked_write_text(output_path, export_to_json(export))
    return output_path


def render_csv(rows: Sequence[CsvRow]) -> str:
    """
    Render rows as CSV text.

    The header comes from the first row's keys; later rows are written
    in that column order, with missing columns left empty and extra keys
    dropped. Values containing commas or quotes are quoted.
    """
    headers = list(rows[0].keys())
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=headers,
        restval="",
        extrasaction="ignore",
        lineterminator="\n",
    )
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


def export_progress_csv(
    game_id: str,
    rows: Sequence[CsvRow],
    output_dir: Path,
    *,
    now: Optional[datetime] = None,
) -> Optional[Path]:
    """
    Export tabular progress rows as CSV.

    Args:
        game_id: Game identifier used in the file name
        rows: One mapping per row; the first row defines the columns
        output_dir: Directory to write into (created if missing)
        now: Export time (defaults to current UTC time)

    Returns:
        Path to the written file, or None if there were no rows

    Raises:
        OSError: If the file cannot be written
    """
    if not rows:
        logger.error("No data to export")
        return None

    output_path = output_dir / export_filename(game_id, "csv", now)
    logger.info(f"Exporting {len(rows)} {game_id} rows to {output_path}")
    locked_write_text(output_path, render_csv(rows))
    return output_path
