"""SQLAlchemy-backed lifecycle store."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NetworkError, NotFoundError
from app.core.storage import async_session
from app.models.application import ApplicationModel, InterviewModel
from app.models.status import ApplicationStatus, InterviewStatus, TaskStatus
from app.models.task import TaskModel
from app.schemas.application import Application, Interview, InterviewSlot
from app.schemas.task import Task
from app.services.store.base import LifecycleStore

logger = logging.getLogger(__name__)


def _now() -> datetime:
    """Get current time as UTC naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class SQLLifecycleStore(LifecycleStore):
    """Lifecycle store on top of the application database."""

    def __init__(self, session_factory=async_session):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            raise NetworkError("database", str(e)) from e

    async def _compare_and_set(
        self,
        session: AsyncSession,
        model,
        entity: str,
        entity_id: str,
        expected_status: str,
        values: dict,
    ) -> None:
        """Update a row only if it still holds ``expected_status``."""
        result = await session.execute(
            update(model)
            .where(model.id == entity_id, model.status == expected_status)
            .values(updated_at=_now(), **values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            return

        row = await session.get(model, entity_id)
        if row is None:
            raise NotFoundError(entity, entity_id)
        raise ConflictError(
            entity,
            entity_id,
            str(expected_status),
            row.status,
            target=values.get("status"),
        )

    async def list_applications(
        self,
        *,
        candidate_id: str | None = None,
        unit_id: str | None = None,
    ) -> list[Application]:
        query = select(ApplicationModel).order_by(ApplicationModel.applied_date.desc())
        if candidate_id is not None:
            query = query.where(ApplicationModel.candidate_id == candidate_id)
        if unit_id is not None:
            query = query.where(ApplicationModel.unit_id == unit_id)

        async with self._session() as session:
            result = await session.execute(query)
            return [Application.model_validate(row) for row in result.scalars().all()]

    async def get_application(self, application_id: str) -> Application:
        async with self._session() as session:
            row = await session.get(ApplicationModel, application_id)
            if row is None:
                raise NotFoundError("application", application_id)
            return Application.model_validate(row)

    async def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        *,
        expected_status: ApplicationStatus,
    ) -> Application:
        async with self._session() as session:
            await self._compare_and_set(
                session,
                ApplicationModel,
                "application",
                application_id,
                expected_status,
                {"status": status.value},
            )
            await session.commit()
            row = await session.get(ApplicationModel, application_id, populate_existing=True)
            return Application.model_validate(row)

    async def record_interview(
        self,
        application_id: str,
        slot: InterviewSlot,
        *,
        expected_status: ApplicationStatus,
    ) -> Application:
        scheduled_at = _naive_utc(slot.date_time)
        booking = {
            "scheduled_at": scheduled_at,
            "title": slot.title,
            "description": slot.description,
            "meeting_link": slot.meeting_link,
            "duration_minutes": slot.duration_minutes,
            "guest_emails": list(slot.guest_emails),
        }
        async with self._session() as session:
            await self._compare_and_set(
                session,
                ApplicationModel,
                "application",
                application_id,
                expected_status,
                {
                    "status": ApplicationStatus.INTERVIEWED.value,
                    "interview_date": scheduled_at,
                },
            )

            result = await session.execute(
                select(InterviewModel)
                .where(
                    InterviewModel.application_id == application_id,
                    InterviewModel.status == InterviewStatus.SCHEDULED.value,
                )
                .order_by(InterviewModel.created_at.desc())
            )
            scheduled = result.scalars().all()

            if scheduled:
                current, *stale = scheduled
                for key, value in booking.items():
                    setattr(current, key, value)
                # At most one booking stays scheduled.
                for interview in stale:
                    interview.status = InterviewStatus.CANCELLED.value
                logger.info(f"Updated interview {current.id} for application {application_id}")
            else:
                session.add(InterviewModel(application_id=application_id, **booking))

            await session.commit()
            row = await session.get(ApplicationModel, application_id, populate_existing=True)
            return Application.model_validate(row)

    async def list_interviews(self, application_id: str) -> list[Interview]:
        query = (
            select(InterviewModel)
            .where(InterviewModel.application_id == application_id)
            .order_by(InterviewModel.scheduled_at.asc())
        )
        async with self._session() as session:
            result = await session.execute(query)
            return [Interview.model_validate(row) for row in result.scalars().all()]

    async def list_tasks(self, application_id: str) -> list[Task]:
        query = (
            select(TaskModel)
            .where(TaskModel.application_id == application_id)
            .order_by(TaskModel.start_date.asc(), TaskModel.created_at.asc())
        )
        async with self._session() as session:
            result = await session.execute(query)
            return [Task.model_validate(row) for row in result.scalars().all()]

    async def get_task(self, task_id: str) -> Task:
        async with self._session() as session:
            row = await session.get(TaskModel, task_id)
            if row is None:
                raise NotFoundError("task", task_id)
            return Task.model_validate(row)

    async def create_task(
        self,
        application_id: str,
        *,
        title: str,
        description: str | None,
        start_date: date | None,
        end_date: date | None,
        color: str,
    ) -> Task:
        async with self._session() as session:
            if await session.get(ApplicationModel, application_id) is None:
                raise NotFoundError("application", application_id)

            row = TaskModel(
                application_id=application_id,
                title=title,
                description=description,
                start_date=start_date,
                end_date=end_date,
                color=color,
                status=TaskStatus.PENDING.value,
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return Task.model_validate(row)

    async def submit_task(
        self,
        task_id: str,
        submission_link: str,
        *,
        expected_status: TaskStatus,
    ) -> Task:
        async with self._session() as session:
            await self._compare_and_set(
                session,
                TaskModel,
                "task",
                task_id,
                expected_status,
                {
                    "status": TaskStatus.SUBMITTED.value,
                    "submission_link": submission_link,
                    "submitted_at": _now(),
                    "review_remarks": None,
                },
            )
            await session.commit()
            row = await session.get(TaskModel, task_id, populate_existing=True)
            return Task.model_validate(row)

    async def review_task(
        self,
        task_id: str,
        status: TaskStatus,
        remarks: str | None,
        *,
        expected_status: TaskStatus,
    ) -> Task:
        async with self._session() as session:
            await self._compare_and_set(
                session,
                TaskModel,
                "task",
                task_id,
                expected_status,
                {
                    "status": status.value,
                    "review_remarks": remarks,
                    "reviewed_at": _now(),
                },
            )
            await session.commit()
            row = await session.get(TaskModel, task_id, populate_existing=True)
            return Task.model_validate(row)
