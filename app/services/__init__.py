"""Lifecycle services."""

from app.services.application_service import ApplicationStateMachine
from app.services.interview_service import InterviewScheduler
from app.services.notifier import NotificationDispatcher
from app.services.task_service import TaskLifecycleManager

__all__ = [
    "ApplicationStateMachine",
    "InterviewScheduler",
    "NotificationDispatcher",
    "TaskLifecycleManager",
]
