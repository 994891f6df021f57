"""Pydantic schemas for request/response validation."""

from app.schemas.application import (
    Application,
    Interview,
    InterviewDetails,
    InterviewSlot,
    NotificationPayload,
    TransitionContext,
    TransitionRequest,
    TransitionResult,
)
from app.schemas.calendar import CalendarDay, CalendarResponse, ViewMode
from app.schemas.task import (
    Task,
    TaskBreakdown,
    TaskCreate,
    TaskProgress,
    TaskReviewRequest,
    TaskStatusCounts,
    TaskSubmitRequest,
)

__all__ = [
    "Application",
    "Interview",
    "CalendarDay",
    "CalendarResponse",
    "InterviewDetails",
    "InterviewSlot",
    "NotificationPayload",
    "Task",
    "TaskBreakdown",
    "TaskCreate",
    "TaskProgress",
    "TaskReviewRequest",
    "TaskStatusCounts",
    "TaskSubmitRequest",
    "TransitionContext",
    "TransitionRequest",
    "TransitionResult",
    "ViewMode",
]
