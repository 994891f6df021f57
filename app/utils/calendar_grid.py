"""Calendar grid construction for the task calendar.

Grids are pure data: a list of day cells with the tasks whose date range
covers each day. Rendering is left to the caller.
"""

import calendar
from collections.abc import Sequence
from datetime import date, timedelta

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.schemas.calendar import CalendarDay, ViewMode
from app.schemas.task import Task

WEEK_STARTS = {
    "monday": calendar.MONDAY,
    "sunday": calendar.SUNDAY,
}


def _parse_view_mode(view_mode: ViewMode | str) -> ViewMode:
    try:
        return ViewMode(view_mode)
    except ValueError:
        raise ValidationError(
            f"Unknown view mode '{view_mode}', expected 'month' or 'week'",
            field="view_mode",
        ) from None


def _resolve_week_start(week_start: int | str | None) -> int:
    if week_start is None:
        week_start = settings.calendar_week_start
    if isinstance(week_start, str):
        if week_start.lower() not in WEEK_STARTS:
            raise ValidationError(
                f"Unknown week start '{week_start}'", field="week_start"
            )
        return WEEK_STARTS[week_start.lower()]
    if week_start not in range(7):
        raise ValidationError(
            f"Week start must be a weekday number 0-6, got {week_start}",
            field="week_start",
        )
    return week_start


def start_of_week(day: date, week_start: int = calendar.SUNDAY) -> date:
    """Return the first day of the week containing ``day``."""
    return day - timedelta(days=(day.weekday() - week_start) % 7)


def end_of_week(day: date, week_start: int = calendar.SUNDAY) -> date:
    """Return the last day of the week containing ``day``."""
    return start_of_week(day, week_start) + timedelta(days=6)


def _month_bounds(day: date) -> tuple[date, date]:
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def task_covers(task: Task, day: date) -> bool:
    """Check whether ``day`` lies inside the task's inclusive date range."""
    if task.start_date is None or task.end_date is None:
        return False
    return task.start_date <= day <= task.end_date


def build_grid(
    reference_date: date,
    view_mode: ViewMode | str,
    tasks: Sequence[Task],
    week_start: int | str | None = None,
) -> list[CalendarDay]:
    """Build the day cells of a month or week view.

    Month grids span whole weeks, so they always hold a multiple of seven
    cells; days outside the queried month are fillers with
    ``is_current_period`` set to False. Week grids hold the seven days of the
    week containing ``reference_date``.
    """
    mode = _parse_view_mode(view_mode)
    first_weekday = _resolve_week_start(week_start)

    if mode == ViewMode.MONTH:
        period_start, period_end = _month_bounds(reference_date)
        grid_start = start_of_week(period_start, first_weekday)
        grid_end = end_of_week(period_end, first_weekday)
    else:
        grid_start = start_of_week(reference_date, first_weekday)
        grid_end = grid_start + timedelta(days=6)
        period_start, period_end = grid_start, grid_end

    dated_tasks = [
        task for task in tasks if task.start_date is not None and task.end_date is not None
    ]

    days = []
    current = grid_start
    while current <= grid_end:
        days.append(
            CalendarDay(
                date=current,
                is_current_period=period_start <= current <= period_end,
                tasks=[task for task in dated_tasks if task_covers(task, current)],
            )
        )
        current += timedelta(days=1)

    return days


def shift_reference_date(
    reference_date: date, view_mode: ViewMode | str, steps: int = 1
) -> date:
    """Move the reference date forward (or backward) by whole months or weeks.

    Month moves keep the day of month, clamped to the length of the target
    month.
    """
    mode = _parse_view_mode(view_mode)
    if mode == ViewMode.WEEK:
        return reference_date + timedelta(weeks=steps)

    month_index = reference_date.year * 12 + (reference_date.month - 1) + steps
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(reference_date.day, last_day))


def is_task_in_grid(task: Task, days: Sequence[CalendarDay]) -> bool:
    """Check whether a task is placed on any cell of a grid."""
    return any(task_covers(task, day.date) for day in days)
