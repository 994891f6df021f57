"""Persistence collaborator contract for the lifecycle engine."""

from abc import ABC, abstractmethod
from datetime import date

from app.models.status import ApplicationStatus, TaskStatus
from app.schemas.application import Application, Interview, InterviewSlot
from app.schemas.task import Task


class LifecycleStore(ABC):
    """Abstract store for applications, interviews and tasks.

    Consistency contract (mutate then refetch):

    * Every mutating method is a compare-and-set on the status the caller
      last read (``expected_status``). If the stored status differs, the
      method raises ``ConflictError`` and writes nothing.
    * A mutating method returns the entity exactly as the store confirmed
      it. Callers must not patch their own copies; they re-fetch the
      collections (``list_applications``, ``list_tasks``) before computing
      progress or calendar views again.
    * A missing entity raises ``NotFoundError``; a failed call to the
      backend raises ``NetworkError``. Nothing is retried automatically.
    """

    @abstractmethod
    async def list_applications(
        self,
        *,
        candidate_id: str | None = None,
        unit_id: str | None = None,
    ) -> list[Application]:
        """List applications of a candidate or of a unit."""
        pass

    @abstractmethod
    async def get_application(self, application_id: str) -> Application:
        """Fetch a single application."""
        pass

    @abstractmethod
    async def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        *,
        expected_status: ApplicationStatus,
    ) -> Application:
        """Persist a new application status."""
        pass

    @abstractmethod
    async def record_interview(
        self,
        application_id: str,
        slot: InterviewSlot,
        *,
        expected_status: ApplicationStatus,
    ) -> Application:
        """Store an interview and move the application to ``interviewed``.

        The application's ``interview_date`` is set to ``slot.date_time``.
        An application holds at most one ``scheduled`` interview: a
        reschedule updates that booking in place. Nothing is booked unless
        the compare-and-set on the application succeeds.
        """
        pass

    @abstractmethod
    async def list_interviews(self, application_id: str) -> list[Interview]:
        """List the interviews of an application, ordered by date."""
        pass

    @abstractmethod
    async def list_tasks(self, application_id: str) -> list[Task]:
        """List the tasks of an application, ordered by start date."""
        pass

    @abstractmethod
    async def get_task(self, task_id: str) -> Task:
        """Fetch a single task."""
        pass

    @abstractmethod
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
        """Create a task in ``pending``."""
        pass

    @abstractmethod
    async def submit_task(
        self,
        task_id: str,
        submission_link: str,
        *,
        expected_status: TaskStatus,
    ) -> Task:
        """Mark a task submitted, store the link and clear review remarks."""
        pass

    @abstractmethod
    async def review_task(
        self,
        task_id: str,
        status: TaskStatus,
        remarks: str | None,
        *,
        expected_status: TaskStatus,
    ) -> Task:
        """Store a review outcome (``accepted`` or ``redo``) with remarks."""
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
