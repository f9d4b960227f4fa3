"""
Module: export

Purpose:
    Provides the ExportData record written when a teacher exports a
    student's progress, and the SummaryValue type for its summary map.

Dependencies:
    - dataclasses (std)
    - .progress.GameProgress

Used By:
    - core.utils.serialization
    - export.writer

Design Note:
    Summary fields are chosen by each game (total score, average time,
    mastery flags...), so the summary is an open string-keyed map whose
    values are restricted to JSON scalars rather than a fixed structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

from .progress import GameProgress

SummaryValue = Union[str, int, float, bool]
SUMMARY_VALUE_TYPES = (str, int, float, bool)


@dataclass(frozen=True)
class ExportData:
    """
    One exported snapshot of a student's progress in a game.

    Attributes:
        export_timestamp: ISO-8601 UTC time of the export
        game_name: Display name of the game
        game_version: Game version string
        student_progress: The exported progress
        summary: Game-defined summary values (read-only view)
    """

    export_timestamp: str
    game_name: str
    game_version: str
    student_progress: GameProgress
    summary: Mapping[str, SummaryValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, value in self.summary.items():
            if not isinstance(value, SUMMARY_VALUE_TYPES):
                raise TypeError(
                    f"Summary value for {key!r} must be str, int, float or bool, "
                    f"got {type(value).__name__}"
                )
        # Freeze a private copy so the caller's dict can change independently
        object.__setattr__(self, "summary", MappingProxyType(dict(self.summary)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "exportTimestamp": self.export_timestamp,
            "gameName": self.game_name,
            "gameVersion": self.game_version,
            "studentProgress": self.student_progress.to_dict(),
            "summary": dict(self.summary),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExportData:
        return cls(
            export_timestamp=data["exportTimestamp"],
            game_name=data["gameName"],
            game_version=data["gameVersion"],
            student_progress=GameProgress.from_dict(data["studentProgress"]),
            summary=data.get("summary", {}),
        )
