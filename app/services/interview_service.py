"""Interview scheduling for applications."""

import logging
from datetime import UTC, datetime

from app.core.exceptions import ConflictError, InvalidTransitionError
from app.models.status import INTERVIEW_SOURCE_STATUSES, ApplicationStatus
from app.schemas.application import (
    Application,
    InterviewDetails,
    InterviewSlot,
    TransitionContext,
    TransitionResult,
)
from app.services.notifier import NotificationDispatcher, notify_transition
from app.services.store.base import LifecycleStore
from app.utils.validators import validate_guest_emails

logger = logging.getLogger(__name__)


def _with_caller_timezone(application: Application, date_time: datetime) -> Application:
    """Express a naive UTC interview date in the offset the caller booked with.

    Stores without timezone support hand back naive UTC values.
    """
    confirmed = application.interview_date
    if date_time.tzinfo is None or confirmed is None or confirmed.tzinfo is not None:
        return application
    return application.model_copy(
        update={
            "interview_date": confirmed.replace(tzinfo=UTC).astimezone(date_time.tzinfo)
        }
    )


class InterviewScheduler:
    """Books interviews and moves applications to ``interviewed``."""

    def __init__(self, store: LifecycleStore, notifier: NotificationDispatcher):
        self.store = store
        self.notifier = notifier

    async def schedule(
        self,
        application_id: str,
        date_time: datetime,
        details: InterviewDetails | None = None,
        context: TransitionContext | None = None,
        expected_status: ApplicationStatus | None = None,
    ) -> TransitionResult:
        """Schedule (or reschedule) an interview.

        Allowed from ``applied``, ``shortlisted`` and ``interviewed``. When
        ``expected_status`` is given, the stored status must still match it.
        """
        details = details or InterviewDetails()
        validate_guest_emails(details.guest_emails).raise_if_invalid()

        application = await self.store.get_application(application_id)
        current = application.status

        if expected_status is not None and current != expected_status:
            raise ConflictError(
                "application",
                application_id,
                expected_status,
                current,
                target=ApplicationStatus.INTERVIEWED,
            )

        if current not in INTERVIEW_SOURCE_STATUSES:
            raise InvalidTransitionError(
                "application", current, ApplicationStatus.INTERVIEWED
            )

        slot = InterviewSlot(
            date_time=date_time, **details.model_dump(exclude={"date_time"})
        )
        confirmed = await self.store.record_interview(
            application_id, slot, expected_status=current
        )
        confirmed = _with_caller_timezone(confirmed, date_time)

        action = "Rescheduled" if current == ApplicationStatus.INTERVIEWED else "Scheduled"
        logger.info(
            f"{action} interview for application {application_id} "
            f"at {confirmed.interview_date}"
        )

        return await notify_transition(self.notifier, confirmed, current, context)

    async def schedule_interview(
        self,
        application_id: str,
        date_time: datetime,
        details: InterviewDetails | None = None,
    ) -> datetime:
        """Schedule an interview and return the confirmed interview date."""
        result = await self.schedule(application_id, date_time, details)
        return result.application.interview_date
