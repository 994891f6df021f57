"""REST client store for the remote platform API."""

import logging
from datetime import date
from typing import Any

import httpx

from app.core.config import settings
from app.core.exceptions import (
    ConflictError,
    NetworkError,
    NotFoundError,
    ValidationError,
)
from app.models.status import ApplicationStatus, InterviewStatus, TaskStatus
from app.schemas.application import Application, Interview, InterviewSlot
from app.schemas.task import Task
from app.services.store.base import LifecycleStore

logger = logging.getLogger(__name__)

SERVICE_NAME = "platform API"


def _unwrap(payload: Any) -> Any:
    """Return the ``data`` member of an enveloped response, if present."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


class PlatformAPIStore(LifecycleStore):
    """Lifecycle store talking to the platform's REST API.

    Requests are never retried; a failed call surfaces immediately so the
    caller can refresh and retry by hand.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Accept": "application/json"}
        token = token if token is not None else settings.platform_api_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.client = httpx.AsyncClient(
            base_url=base_url or settings.platform_api_base_url,
            timeout=httpx.Timeout(timeout or settings.request_timeout),
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        *,
        entity: str,
        entity_id: str | None = None,
        expected_status: str | None = None,
        **kwargs,
    ) -> Any:
        """Send a request and translate failures into lifecycle errors."""
        try:
            response = await self.client.request(method, endpoint, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Network error for {method} {endpoint}: {e!s}")
            raise NetworkError(SERVICE_NAME, str(e)) from e

        if response.status_code == 404:
            raise NotFoundError(entity, entity_id or "?")

        if response.status_code in (409, 412):
            body = self._error_body(response)
            actual = body.get("currentStatus") or body.get("status") or "unknown"
            target = (kwargs.get("json") or {}).get("status")
            raise ConflictError(
                entity,
                entity_id or "?",
                expected_status or "?",
                str(actual),
                target=target,
            )

        if response.status_code in (400, 422):
            body = self._error_body(response)
            raise ValidationError(str(body.get("message") or body))

        if response.status_code >= 400:
            body = self._error_body(response)
            logger.error(
                f"{SERVICE_NAME} error: {response.status_code} - {body}, "
                f"Endpoint: {endpoint}, Method: {method}"
            )
            raise NetworkError(
                SERVICE_NAME, str(body.get("message") or body), response.status_code
            )

        if not response.content:
            return None

        try:
            return _unwrap(response.json())
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint}: {response.text[:500]}")
            raise NetworkError(SERVICE_NAME, f"Invalid JSON response: {e!s}") from e

    @staticmethod
    def _error_body(response: httpx.Response) -> dict:
        try:
            body = response.json()
        except ValueError:
            return {"message": response.text[:500]}
        return body if isinstance(body, dict) else {"message": str(body)}

    async def list_applications(
        self,
        *,
        candidate_id: str | None = None,
        unit_id: str | None = None,
    ) -> list[Application]:
        params = {}
        if candidate_id is not None:
            params["candidateId"] = candidate_id
        if unit_id is not None:
            params["unitId"] = unit_id

        data = await self._make_request(
            "GET", "/applications", entity="application", params=params
        )
        return [Application.model_validate(item) for item in data or []]

    async def get_application(self, application_id: str) -> Application:
        data = await self._make_request(
            "GET",
            f"/applications/{application_id}",
            entity="application",
            entity_id=application_id,
        )
        return Application.model_validate(data)

    async def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        *,
        expected_status: ApplicationStatus,
    ) -> Application:
        data = await self._make_request(
            "PATCH",
            f"/applications/{application_id}",
            entity="application",
            entity_id=application_id,
            expected_status=expected_status,
            json={"status": status.value, "expectedStatus": expected_status.value},
        )
        return Application.model_validate(data)

    async def record_interview(
        self,
        application_id: str,
        slot: InterviewSlot,
        *,
        expected_status: ApplicationStatus,
    ) -> Application:
        # The guarded status change comes first; a lost race books nothing.
        data = await self._make_request(
            "PATCH",
            f"/applications/{application_id}",
            entity="application",
            entity_id=application_id,
            expected_status=expected_status,
            json={
                "status": ApplicationStatus.INTERVIEWED.value,
                "interviewDate": slot.date_time.isoformat(),
                "expectedStatus": expected_status.value,
            },
        )
        confirmed = Application.model_validate(data)

        booking = slot.model_dump(mode="json", by_alias=True, exclude={"date_time"})
        booking["scheduledAt"] = slot.date_time.isoformat()

        scheduled = [
            interview
            for interview in await self.list_interviews(application_id)
            if interview.status == InterviewStatus.SCHEDULED
        ]
        if scheduled:
            await self._make_request(
                "PUT",
                f"/interviews/{scheduled[-1].id}",
                entity="interview",
                entity_id=scheduled[-1].id,
                json=booking,
            )
        else:
            await self._make_request(
                "POST",
                "/interviews",
                entity="application",
                entity_id=application_id,
                json={"applicationId": application_id, **booking},
            )
        return confirmed

    async def list_interviews(self, application_id: str) -> list[Interview]:
        data = await self._make_request(
            "GET",
            "/interviews",
            entity="application",
            entity_id=application_id,
            params={"applicationId": application_id},
        )
        interviews = [Interview.model_validate(item) for item in data or []]
        return sorted(interviews, key=lambda interview: interview.scheduled_at)

    async def list_tasks(self, application_id: str) -> list[Task]:
        data = await self._make_request(
            "GET",
            "/tasks",
            entity="application",
            entity_id=application_id,
            params={"applicationId": application_id},
        )
        return [Task.model_validate(item) for item in data or []]

    async def get_task(self, task_id: str) -> Task:
        data = await self._make_request(
            "GET", f"/tasks/{task_id}", entity="task", entity_id=task_id
        )
        return Task.model_validate(data)

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
        data = await self._make_request(
            "POST",
            "/tasks",
            entity="application",
            entity_id=application_id,
            json={
                "applicationId": application_id,
                "title": title,
                "description": description,
                "startDate": start_date.isoformat() if start_date else None,
                "endDate": end_date.isoformat() if end_date else None,
                "color": color,
            },
        )
        return Task.model_validate(data)

    async def submit_task(
        self,
        task_id: str,
        submission_link: str,
        *,
        expected_status: TaskStatus,
    ) -> Task:
        data = await self._make_request(
            "PATCH",
            f"/tasks/{task_id}",
            entity="task",
            entity_id=task_id,
            expected_status=expected_status,
            json={
                "status": TaskStatus.SUBMITTED.value,
                "submissionLink": submission_link,
                "reviewRemarks": None,
                "expectedStatus": expected_status.value,
            },
        )
        return Task.model_validate(data)

    async def review_task(
        self,
        task_id: str,
        status: TaskStatus,
        remarks: str | None,
        *,
        expected_status: TaskStatus,
    ) -> Task:
        data = await self._make_request(
            "PATCH",
            f"/tasks/{task_id}",
            entity="task",
            entity_id=task_id,
            expected_status=expected_status,
            json={
                "status": status.value,
                "reviewRemarks": remarks,
                "expectedStatus": expected_status.value,
            },
        )
        return Task.model_validate(data)
