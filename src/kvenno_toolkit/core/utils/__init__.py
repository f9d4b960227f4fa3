"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_progress,
    deserialize_progress,
    serialize_export,
    deserialize_export,
    export_to_json,
    load_export_json,
)

__all__ = [
    "serialize_progress",
    "deserialize_progress",
    "serialize_export",
    "deserialize_export",
    "export_to_json",
    "load_export_json",
]
