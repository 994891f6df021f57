"""Utility modules."""

from app.utils.calendar_grid import build_grid, shift_reference_date
from app.utils.progress import calculate_overall_task_progress
from app.utils.validators import ValidationResult

__all__ = [
    "ValidationResult",
    "build_grid",
    "calculate_overall_task_progress",
    "shift_reference_date",
]
