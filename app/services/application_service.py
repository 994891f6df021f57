"""State machine for internship applications."""

import logging

from app.core.exceptions import InvalidTransitionError, ValidationError
from app.models.status import ApplicationStatus, can_transition_application
from app.schemas.application import Application, TransitionContext, TransitionResult
from app.services.interview_service import InterviewScheduler
from app.services.notifier import NotificationDispatcher, notify_transition
from app.services.store.base import LifecycleStore

logger = logging.getLogger(__name__)


def parse_application_status(value: ApplicationStatus | str) -> ApplicationStatus:
    """Convert a raw status value into an ApplicationStatus."""
    try:
        return ApplicationStatus(value)
    except ValueError:
        raise ValidationError(
            f"Unknown application status '{value}'", field="target_status"
        ) from None


class ApplicationStateMachine:
    """Owns the transition rules of a single application.

    Transitions never mutate the caller's ``Application``; the confirmed
    application is returned on the result. Callers re-fetch their
    collections before relying on derived views.
    """

    def __init__(
        self,
        store: LifecycleStore,
        notifier: NotificationDispatcher,
        interview_scheduler: InterviewScheduler | None = None,
    ):
        self.store = store
        self.notifier = notifier
        self.interview_scheduler = interview_scheduler or InterviewScheduler(
            store, notifier
        )

    async def transition(
        self,
        application: Application,
        target_status: ApplicationStatus | str,
        context: TransitionContext | None = None,
    ) -> TransitionResult:
        """Move an application to ``target_status``."""
        target = parse_application_status(target_status)
        context = context or TransitionContext()
        current = application.status

        if target == current:
            logger.info(
                f"Application {application.id} already '{current}', nothing to do"
            )
            return TransitionResult(
                application=application,
                previous_status=current,
                changed=False,
            )

        if not can_transition_application(current, target):
            raise InvalidTransitionError("application", current, target)

        if target == ApplicationStatus.INTERVIEWED:
            if context.interview is None:
                raise ValidationError(
                    "Interview date and time are required to mark an application interviewed",
                    field="interview",
                )
            return await self.interview_scheduler.schedule(
                application.id,
                context.interview.date_time,
                context.interview,
                context=context,
                expected_status=current,
            )

        confirmed = await self.store.update_application_status(
            application.id, target, expected_status=current
        )
        logger.info(f"Application {application.id}: {current} -> {confirmed.status}")

        return await notify_transition(self.notifier, confirmed, current, context)

    async def refresh(self, application: Application) -> Application:
        """Re-fetch the authoritative copy of an application."""
        return await self.store.get_application(application.id)
