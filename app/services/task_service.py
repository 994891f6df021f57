"""Task review workflow."""

import logging
from datetime import date

from app.core.config import settings
from app.core.exceptions import InvalidTransitionError, ValidationError
from app.models.status import (
    REVIEW_OUTCOMES,
    ApplicationStatus,
    ReviewDecision,
    TaskStatus,
    can_transition_task,
)
from app.schemas.task import Task
from app.services.store.base import LifecycleStore
from app.utils.validators import validate_submission_link, validate_task_input

logger = logging.getLogger(__name__)


class TaskLifecycleManager:
    """Creates, submits and reviews tasks of hired applications."""

    def __init__(self, store: LifecycleStore):
        self.store = store

    async def create(
        self,
        application_id: str,
        title: str,
        description: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        color: str | None = None,
    ) -> Task:
        """Create a ``pending`` task for a hired application."""
        validation = validate_task_input(title, start_date, end_date)
        validation.raise_if_invalid()
        for warning in validation.warnings:
            logger.debug(f"Task '{title}' for application {application_id}: {warning}")

        application = await self.store.get_application(application_id)
        if application.status != ApplicationStatus.HIRED:
            raise ValidationError(
                f"Tasks can only be assigned to hired applications "
                f"(application {application_id} is '{application.status}')",
                field="application_id",
            )

        task = await self.store.create_task(
            application_id,
            title=title.strip(),
            description=description,
            start_date=start_date,
            end_date=end_date,
            color=color or settings.default_task_color,
        )
        logger.info(f"Created task {task.id} for application {application_id}")
        return task

    async def submit(self, task_id: str, submission_link: str) -> Task:
        """Submit (or resubmit) work for a ``pending`` or ``redo`` task."""
        validate_submission_link(submission_link).raise_if_invalid()

        task = await self.store.get_task(task_id)
        self._require_transition(task, TaskStatus.SUBMITTED)

        confirmed = await self.store.submit_task(
            task_id, submission_link.strip(), expected_status=task.status
        )
        logger.info(f"Task {task_id}: {task.status} -> {confirmed.status}")
        return confirmed

    async def review(
        self,
        task_id: str,
        decision: ReviewDecision | str,
        remarks: str | None = None,
    ) -> Task:
        """Accept a submitted task or send it back for redo."""
        try:
            decision = ReviewDecision(decision)
        except ValueError:
            raise ValidationError(
                f"Unknown review decision '{decision}', expected 'accept' or 'redo'",
                field="decision",
            ) from None

        target = REVIEW_OUTCOMES[decision]
        task = await self.store.get_task(task_id)
        self._require_transition(task, target)

        confirmed = await self.store.review_task(
            task_id, target, remarks, expected_status=task.status
        )
        logger.info(f"Task {task_id} reviewed: {task.status} -> {confirmed.status}")
        return confirmed

    @staticmethod
    def _require_transition(task: Task, target: TaskStatus) -> None:
        if not can_transition_task(task.status, target):
            raise InvalidTransitionError("task", task.status, target)
