"""Pytest configuration and fixtures."""

import os
import sys
from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

# Add the app directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ["STORE_BACKEND"] = "database"
os.environ["NOTIFICATION_ENABLED"] = "true"
os.environ.pop("NOTIFICATION_URL", None)
os.environ["CALENDAR_WEEK_START"] = "sunday"

from app.core.exceptions import ConflictError, NotFoundError  # noqa: E402
from app.models.status import ApplicationStatus, InterviewStatus, TaskStatus  # noqa: E402
from app.schemas.application import Application, Interview  # noqa: E402
from app.schemas.task import Task  # noqa: E402
from app.services.store.base import LifecycleStore  # noqa: E402


class InMemoryLifecycleStore(LifecycleStore):
    """Dict-backed store honouring the compare-and-set contract."""

    def __init__(self, applications=(), tasks=()):
        self.applications: dict[str, Application] = {a.id: a for a in applications}
        self.tasks: dict[str, Task] = {t.id: t for t in tasks}
        self.interviews: list[Interview] = []
        self.writes = 0

    def _expect(
        self, entity: str, items: dict, entity_id: str, expected: str, target: str
    ) -> None:
        if entity_id not in items:
            raise NotFoundError(entity, entity_id)
        actual = items[entity_id].status
        if actual != expected:
            raise ConflictError(entity, entity_id, expected, actual, target=target)

    async def list_applications(self, *, candidate_id=None, unit_id=None):
        return [
            a
            for a in self.applications.values()
            if (candidate_id is None or a.candidate_id == candidate_id)
            and (unit_id is None or a.unit_id == unit_id)
        ]

    async def get_application(self, application_id):
        if application_id not in self.applications:
            raise NotFoundError("application", application_id)
        return self.applications[application_id]

    async def update_application_status(self, application_id, status, *, expected_status):
        self._expect(
            "application", self.applications, application_id, expected_status, status
        )
        updated = self.applications[application_id].model_copy(update={"status": status})
        self.applications[application_id] = updated
        self.writes += 1
        return updated

    async def record_interview(self, application_id, slot, *, expected_status):
        self._expect(
            "application",
            self.applications,
            application_id,
            expected_status,
            ApplicationStatus.INTERVIEWED,
        )
        updated = self.applications[application_id].model_copy(
            update={
                "status": ApplicationStatus.INTERVIEWED,
                "interview_date": slot.date_time,
            }
        )
        self.applications[application_id] = updated

        booking = slot.model_dump(exclude={"date_time"})
        booking["scheduled_at"] = slot.date_time
        for index, interview in enumerate(self.interviews):
            if (
                interview.application_id == application_id
                and interview.status == InterviewStatus.SCHEDULED
            ):
                self.interviews[index] = interview.model_copy(update=booking)
                break
        else:
            self.interviews.append(
                Interview(id=uuid4().hex, application_id=application_id, **booking)
            )
        self.writes += 1
        return updated

    async def list_interviews(self, application_id):
        return sorted(
            (i for i in self.interviews if i.application_id == application_id),
            key=lambda interview: interview.scheduled_at,
        )

    async def list_tasks(self, application_id):
        return [t for t in self.tasks.values() if t.application_id == application_id]

    async def get_task(self, task_id):
        if task_id not in self.tasks:
            raise NotFoundError("task", task_id)
        return self.tasks[task_id]

    async def create_task(
        self, application_id, *, title, description, start_date, end_date, color
    ):
        if application_id not in self.applications:
            raise NotFoundError("application", application_id)
        task = Task(
            id=uuid4().hex,
            application_id=application_id,
            title=title,
            description=description,
            start_date=start_date,
            end_date=end_date,
            color=color,
            status=TaskStatus.PENDING,
        )
        self.tasks[task.id] = task
        self.writes += 1
        return task

    async def submit_task(self, task_id, submission_link, *, expected_status):
        self._expect("task", self.tasks, task_id, expected_status, TaskStatus.SUBMITTED)
        updated = self.tasks[task_id].model_copy(
            update={
                "status": TaskStatus.SUBMITTED,
                "submission_link": submission_link,
                "review_remarks": None,
                "submitted_at": datetime(2024, 3, 1, 12, 0),
            }
        )
        self.tasks[task_id] = updated
        self.writes += 1
        return updated

    async def review_task(self, task_id, status, remarks, *, expected_status):
        self._expect("task", self.tasks, task_id, expected_status, status)
        updated = self.tasks[task_id].model_copy(
            update={
                "status": status,
                "review_remarks": remarks,
                "reviewed_at": datetime(2024, 3, 2, 12, 0),
            }
        )
        self.tasks[task_id] = updated
        self.writes += 1
        return updated


@pytest.fixture
def make_application():
    """Factory for Application objects."""

    def _make(status=ApplicationStatus.APPLIED, **overrides):
        data = {
            "id": uuid4().hex,
            "candidate_id": "cand_1",
            "internship_id": "intern_1",
            "unit_id": "unit_1",
            "status": status,
            "applied_date": datetime(2024, 1, 15, 9, 30),
            "profile_match_score": 82,
            "candidate_name": "Asha Verma",
            "candidate_email": "asha@example.com",
        }
        data.update(overrides)
        return Application(**data)

    return _make


@pytest.fixture
def make_task():
    """Factory for Task objects."""

    def _make(status=TaskStatus.PENDING, **overrides):
        data = {
            "id": uuid4().hex,
            "application_id": "app_1",
            "title": "Build landing page",
            "description": "Responsive layout",
            "color": "#10B981",
            "start_date": date(2024, 3, 4),
            "end_date": date(2024, 3, 8),
            "status": status,
        }
        data.update(overrides)
        return Task(**data)

    return _make


@pytest.fixture
def mock_notifier():
    """Mock notification dispatcher for testing."""
    notifier = MagicMock()
    notifier.notify = AsyncMock(return_value=True)
    notifier.close = AsyncMock()
    return notifier


@pytest.fixture
def make_store():
    """Factory for in-memory stores pre-loaded with entities."""
    return InMemoryLifecycleStore
