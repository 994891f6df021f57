"""Database models."""

from app.models.application import ApplicationModel, InterviewModel
from app.models.status import (
    ApplicationStatus,
    InterviewStatus,
    ReviewDecision,
    TaskStatus,
)
from app.models.task import TaskModel

__all__ = [
    "ApplicationModel",
    "ApplicationStatus",
    "InterviewModel",
    "InterviewStatus",
    "ReviewDecision",
    "TaskModel",
    "TaskStatus",
]
