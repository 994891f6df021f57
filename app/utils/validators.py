"""Input validation for task and interview operations."""

from dataclasses import dataclass, field as dc_field
from datetime import date
from urllib.parse import urlparse

from app.core.exceptions import ValidationError


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    field: str | None = None
    warnings: list[str] = dc_field(default_factory=list)

    def raise_if_invalid(self) -> None:
        """Raise ValidationError when the result is not valid."""
        if not self.is_valid:
            raise ValidationError(self.error or "Invalid input", field=self.field)


def validate_task_input(
    title: str | None,
    start_date: date | None,
    end_date: date | None,
) -> ValidationResult:
    """Validate the fields of a new task."""
    if not title or not title.strip():
        return ValidationResult(
            is_valid=False, error="Task name is required", field="title"
        )

    if start_date and end_date and end_date < start_date:
        return ValidationResult(
            is_valid=False,
            error="Due date cannot be before start date",
            field="end_date",
        )

    warnings = []
    if start_date is None or end_date is None:
        warnings.append("Task without both dates will not appear on the calendar")

    return ValidationResult(is_valid=True, warnings=warnings)


def validate_submission_link(link: str | None) -> ValidationResult:
    """Validate a task submission link."""
    if not link or not link.strip():
        return ValidationResult(
            is_valid=False,
            error="Submission link is required",
            field="submission_link",
        )

    parsed = urlparse(link.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return ValidationResult(
            is_valid=False,
            error="Invalid URL format",
            field="submission_link",
        )

    return ValidationResult(is_valid=True)


def validate_guest_emails(emails: list[str]) -> ValidationResult:
    """Validate interview guest emails."""
    for email in emails:
        local, _, domain = email.strip().partition("@")
        if not local or "." not in domain or " " in email.strip():
            return ValidationResult(
                is_valid=False,
                error=f"Invalid guest email: {email}",
                field="guest_emails",
            )
    return ValidationResult(is_valid=True)
