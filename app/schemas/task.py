"""Schemas for tasks and progress aggregation."""

from datetime import date, datetime

from pydantic import Field, model_validator

from app.models.status import ReviewDecision, TaskStatus
from app.schemas.application import CamelModel


class Task(CamelModel):
    """Task as confirmed by the store."""

    id: str
    application_id: str
    title: str
    description: str | None = None
    color: str = "#3B82F6"
    start_date: date | None = None
    end_date: date | None = None
    status: TaskStatus = TaskStatus.PENDING
    submission_link: str | None = None
    review_remarks: str | None = None
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="after")
    def _check_date_order(self) -> "Task":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class TaskCreate(CamelModel):
    """Request to create a task for a hired application."""

    title: str = Field(..., description="Task name")
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    color: str | None = Field(default=None, description="Display colour tag")


class TaskSubmitRequest(CamelModel):
    """Candidate submission of task work."""

    submission_link: str = Field(..., description="Link to the submitted work")


class TaskReviewRequest(CamelModel):
    """Unit review of a submitted task."""

    decision: ReviewDecision
    remarks: str | None = None


class TaskProgress(CamelModel):
    """Completion percentage and overall date range of a task list."""

    percentage: int = Field(..., ge=0, le=100)
    start_date: date | None = None
    end_date: date | None = None


class TaskStatusCounts(CamelModel):
    """Number of tasks in each status."""

    total: int = 0
    pending: int = 0
    submitted: int = 0
    redo: int = 0
    accepted: int = 0


class TaskBreakdown(CamelModel):
    """Completed / in-review / incomplete split of a task list."""

    total: int = 0
    completed: int = 0
    in_review: int = 0
    incomplete: int = 0
    percentage: int = 0


class ProgressResponse(CamelModel):
    """Progress view for a hired application."""

    application_id: str
    progress: TaskProgress
    breakdown: TaskBreakdown
    counts: TaskStatusCounts
