"""Status enumerations and transition tables."""

from enum import StrEnum


class ApplicationStatus(StrEnum):
    """Lifecycle states of an internship application."""

    APPLIED = "applied"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    INTERVIEWED = "interviewed"
    HIRED = "hired"


class TaskStatus(StrEnum):
    """Review states of a task assigned to a hired candidate."""

    PENDING = "pending"
    SUBMITTED = "submitted"
    REDO = "redo"
    ACCEPTED = "accepted"


class InterviewStatus(StrEnum):
    """States of a booked interview."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class ReviewDecision(StrEnum):
    """Outcome a unit picks when reviewing a submitted task."""

    ACCEPT = "accept"
    REDO = "redo"


APPLICATION_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.APPLIED: frozenset(
        {ApplicationStatus.SHORTLISTED, ApplicationStatus.REJECTED}
    ),
    ApplicationStatus.SHORTLISTED: frozenset(
        {
            ApplicationStatus.REJECTED,
            ApplicationStatus.HIRED,
            ApplicationStatus.INTERVIEWED,
        }
    ),
    ApplicationStatus.INTERVIEWED: frozenset(
        {ApplicationStatus.HIRED, ApplicationStatus.REJECTED}
    ),
    ApplicationStatus.HIRED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

# Statuses from which an interview may be (re)scheduled.
INTERVIEW_SOURCE_STATUSES = frozenset(
    {
        ApplicationStatus.APPLIED,
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.INTERVIEWED,
    }
)

TASK_TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.PENDING: frozenset({TaskStatus.SUBMITTED}),
    TaskStatus.SUBMITTED: frozenset({TaskStatus.ACCEPTED, TaskStatus.REDO}),
    TaskStatus.REDO: frozenset({TaskStatus.SUBMITTED}),
    TaskStatus.ACCEPTED: frozenset(),
}

REVIEW_OUTCOMES: dict[ReviewDecision, TaskStatus] = {
    ReviewDecision.ACCEPT: TaskStatus.ACCEPTED,
    ReviewDecision.REDO: TaskStatus.REDO,
}


def can_transition_application(
    current: ApplicationStatus, target: ApplicationStatus
) -> bool:
    """Check whether ``target`` is directly reachable from ``current``."""
    return target in APPLICATION_TRANSITIONS[current]


def can_transition_task(current: TaskStatus, target: TaskStatus) -> bool:
    """Check whether ``target`` is directly reachable from ``current``."""
    return target in TASK_TRANSITIONS[current]
