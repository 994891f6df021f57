"""Dispatch of application status notifications."""

import logging

import httpx

from app.core.config import settings
from app.core.exceptions import NotificationError
from app.models.status import ApplicationStatus
from app.schemas.application import (
    Application,
    NotificationPayload,
    TransitionContext,
    TransitionResult,
)

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Posts status-change notifications to the notification endpoint."""

    def __init__(
        self,
        url: str | None = None,
        enabled: bool | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url if url is not None else settings.notification_url
        self.enabled = enabled if enabled is not None else settings.notification_enabled
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout or settings.request_timeout),
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def notify(self, payload: NotificationPayload) -> bool:
        """Send a notification.

        Returns False when notifications are disabled or no endpoint is
        configured. Raises NotificationError when the dispatch fails.
        """
        if not self.enabled or not self.url:
            logger.debug(
                f"Notifications disabled, skipping '{payload.action}' "
                f"for application {payload.application_id}"
            )
            return False

        try:
            response = await self.client.post(
                self.url, json=payload.model_dump(mode="json", by_alias=True)
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationError(
                payload.application_id,
                f"HTTP {e.response.status_code}: {e.response.text[:200]}",
            ) from e
        except httpx.RequestError as e:
            raise NotificationError(payload.application_id, f"Network error: {e!s}") from e

        logger.info(
            f"Notification '{payload.action}' sent for application {payload.application_id}"
        )
        return True


async def notify_transition(
    notifier: NotificationDispatcher,
    application: Application,
    previous_status: ApplicationStatus,
    context: TransitionContext | None = None,
) -> TransitionResult:
    """Notify about a confirmed transition and build its result.

    A failed dispatch is logged and reported on the result; the confirmed
    status is kept.
    """
    context = context or TransitionContext()
    payload = NotificationPayload(
        application_id=application.id,
        action=application.status,
        candidate_email=context.candidate_email or application.candidate_email,
        candidate_name=context.candidate_name or application.candidate_name,
    )

    try:
        notified = await notifier.notify(payload)
    except NotificationError as e:
        logger.warning(f"Status updated, notification failed: {e.message}")
        return TransitionResult(
            application=application,
            previous_status=previous_status,
            notified=False,
            notification_error=e.message,
        )

    return TransitionResult(
        application=application,
        previous_status=previous_status,
        notified=notified,
    )
