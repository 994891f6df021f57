"""Progress aggregation over a candidate's tasks."""

from collections.abc import Sequence

from app.models.status import TaskStatus
from app.schemas.task import Task, TaskBreakdown, TaskProgress, TaskStatusCounts


def _round_half_up_percentage(part: int, total: int) -> int:
    """Return ``round(100 * part / total)`` with halves rounded up."""
    return (200 * part + total) // (2 * total)


def calculate_overall_task_progress(tasks: Sequence[Task]) -> TaskProgress:
    """Compute completion percentage and date range of a task list.

    Only ``accepted`` tasks count as complete; ``submitted`` and ``redo``
    give no partial credit. The date range covers tasks that have both a
    start and an end date, while every task counts in the denominator.
    """
    if not tasks:
        return TaskProgress(percentage=0, start_date=None, end_date=None)

    accepted = sum(1 for task in tasks if task.status == TaskStatus.ACCEPTED)
    percentage = _round_half_up_percentage(accepted, len(tasks))

    dated = [task for task in tasks if task.start_date and task.end_date]
    start_date = min((task.start_date for task in dated), default=None)
    end_date = max((task.end_date for task in dated), default=None)

    return TaskProgress(percentage=percentage, start_date=start_date, end_date=end_date)


def get_task_status_counts(tasks: Sequence[Task]) -> TaskStatusCounts:
    """Count tasks per status."""
    counts = {status: 0 for status in TaskStatus}
    for task in tasks:
        counts[task.status] += 1

    return TaskStatusCounts(
        total=len(tasks),
        pending=counts[TaskStatus.PENDING],
        submitted=counts[TaskStatus.SUBMITTED],
        redo=counts[TaskStatus.REDO],
        accepted=counts[TaskStatus.ACCEPTED],
    )


def get_task_breakdown(tasks: Sequence[Task]) -> TaskBreakdown:
    """Split tasks into completed, in review and incomplete."""
    counts = get_task_status_counts(tasks)
    return TaskBreakdown(
        total=counts.total,
        completed=counts.accepted,
        in_review=counts.submitted,
        incomplete=counts.pending + counts.redo,
        percentage=calculate_overall_task_progress(tasks).percentage,
    )
