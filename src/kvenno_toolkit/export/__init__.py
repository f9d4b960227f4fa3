"""
Export Package

Progress export to JSON/CSV files and display formatting helpers.
"""

from .formatting import format_time_spent, calculate_percentage
from .writer import (
    build_export_data,
    export_filename,
    export_progress_json,
    export_progress_csv,
    render_csv,
)

__all__ = [
    # formatting
    "format_time_spent",
    "calculate_percentage",
    # writer
    "build_export_data",
    "export_filename",
    "export_progress_json",
    "export_progress_csv",
    "render_csv",
]
