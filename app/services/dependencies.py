"""FastAPI dependencies for lifecycle services."""

from collections.abc import AsyncGenerator

from fastapi import Depends

from app.services.application_service import ApplicationStateMachine
from app.services.interview_service import InterviewScheduler
from app.services.notifier import NotificationDispatcher
from app.services.store.base import LifecycleStore
from app.services.store.factory import create_lifecycle_store
from app.services.task_service import TaskLifecycleManager


async def get_lifecycle_store() -> AsyncGenerator[LifecycleStore, None]:
    """Dependency for the configured lifecycle store."""
    store = create_lifecycle_store()
    try:
        yield store
    finally:
        await store.close()


async def get_notifier() -> AsyncGenerator[NotificationDispatcher, None]:
    """Dependency for the notification dispatcher."""
    notifier = NotificationDispatcher()
    try:
        yield notifier
    finally:
        await notifier.close()


def get_interview_scheduler(
    store: LifecycleStore = Depends(get_lifecycle_store),
    notifier: NotificationDispatcher = Depends(get_notifier),
) -> InterviewScheduler:
    """Create interview scheduler with dependencies."""
    return InterviewScheduler(store, notifier)


def get_state_machine(
    store: LifecycleStore = Depends(get_lifecycle_store),
    notifier: NotificationDispatcher = Depends(get_notifier),
    scheduler: InterviewScheduler = Depends(get_interview_scheduler),
) -> ApplicationStateMachine:
    """Create application state machine with dependencies."""
    return ApplicationStateMachine(store, notifier, scheduler)


def get_task_manager(
    store: LifecycleStore = Depends(get_lifecycle_store),
) -> TaskLifecycleManager:
    """Create task lifecycle manager with dependencies."""
    return TaskLifecycleManager(store)
