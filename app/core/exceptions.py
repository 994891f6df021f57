"""Custom exceptions for the lifecycle engine."""

from fastapi import HTTPException, status


class LifecycleError(Exception):
    """Base exception for lifecycle errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(LifecycleError):
    """Raised when input is malformed and the operation is never attempted."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class InvalidTransitionError(LifecycleError):
    """Raised when a requested status change is not reachable."""

    def __init__(
        self, entity: str, current: str, target: str | None, message: str | None = None
    ):
        self.entity = entity
        self.current = current
        self.target = target
        super().__init__(
            message or f"Cannot move {entity} from '{current}' to '{target}'"
        )


class ConflictError(InvalidTransitionError):
    """Raised when a concurrent update invalidated the caller's precondition."""

    def __init__(
        self,
        entity: str,
        entity_id: str,
        expected: str,
        actual: str,
        target: str | None = None,
    ):
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            entity,
            actual,
            target,
            message=(
                f"{entity.capitalize()} {entity_id} was modified concurrently "
                f"(expected '{expected}', found '{actual}'). Please refresh."
            ),
        )


class NotFoundError(LifecycleError):
    """Raised when a referenced application or task no longer exists."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} {entity_id} not found")


class NetworkError(LifecycleError):
    """Raised when a collaborator call failed to complete."""

    def __init__(self, service: str, detail: str, status_code: int | None = None):
        self.service = service
        self.detail = detail
        self.status_code = status_code
        suffix = f" ({status_code})" if status_code is not None else ""
        super().__init__(f"{service} request failed{suffix}: {detail}")


class NotificationError(LifecycleError):
    """Raised when a status notification could not be dispatched."""

    def __init__(self, application_id: str, detail: str):
        self.application_id = application_id
        self.detail = detail
        super().__init__(
            f"Notification for application {application_id} failed: {detail}"
        )


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def conflict_exception(detail: str = "Conflicting state") -> HTTPException:
    """Return a 409 Conflict exception."""
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=detail,
    )


def unprocessable_exception(detail: str = "Invalid input") -> HTTPException:
    """Return a 422 Unprocessable Entity exception."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=detail,
    )


def bad_gateway_exception(detail: str = "Upstream service error") -> HTTPException:
    """Return a 502 Bad Gateway exception."""
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=detail,
    )


def to_http_exception(error: LifecycleError) -> HTTPException:
    """Map a lifecycle error onto the matching HTTP exception."""
    if isinstance(error, NotFoundError):
        return not_found_exception(error.message)
    if isinstance(error, InvalidTransitionError):
        return conflict_exception(error.message)
    if isinstance(error, ValidationError):
        return unprocessable_exception(error.message)
    return bad_gateway_exception(error.message)
