"""Schemas for applications, interviews and status transitions."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.status import ApplicationStatus, InterviewStatus


class CamelModel(BaseModel):
    """Base schema accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Application(CamelModel):
    """Application as confirmed by the store."""

    model_config = ConfigDict(frozen=True)

    id: str
    candidate_id: str
    internship_id: str
    unit_id: str | None = None
    status: ApplicationStatus
    applied_date: datetime
    profile_match_score: int = Field(default=0, ge=0, le=100)
    interview_date: datetime | None = None
    candidate_name: str | None = None
    candidate_email: str | None = None


class InterviewDetails(CamelModel):
    """Extra payload carried by an interview scheduling."""

    title: str = Field(default="Interview", min_length=1)
    description: str | None = None
    meeting_link: str | None = Field(default=None, description="Meeting URL or tool")
    duration_minutes: int = Field(default=60, ge=5, le=480)
    guest_emails: list[str] = Field(default_factory=list)


class InterviewSlot(InterviewDetails):
    """Interview details together with the date/time being booked."""

    date_time: datetime


class Interview(InterviewDetails):
    """Interview booking as confirmed by the store."""

    id: str
    application_id: str
    scheduled_at: datetime
    status: InterviewStatus = InterviewStatus.SCHEDULED
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("guest_emails", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []


class TransitionContext(CamelModel):
    """Caller-supplied context for an application transition."""

    candidate_email: str | None = Field(
        default=None, description="Overrides the email stored on the application"
    )
    candidate_name: str | None = Field(
        default=None, description="Overrides the name stored on the application"
    )
    interview: InterviewSlot | None = Field(
        default=None, description="Required when moving to 'interviewed'"
    )


class TransitionRequest(TransitionContext):
    """Request to move an application to another status."""

    target_status: ApplicationStatus


class NotificationPayload(CamelModel):
    """Body sent to the notification dispatcher."""

    application_id: str
    action: ApplicationStatus
    candidate_email: str | None = None
    candidate_name: str | None = None


class TransitionResult(CamelModel):
    """Outcome of a confirmed transition."""

    application: Application
    previous_status: ApplicationStatus
    changed: bool = True
    notified: bool = False
    notification_error: str | None = None
