"""Core application components."""

from app.core.config import settings
from app.core.exceptions import (
    ConflictError,
    InvalidTransitionError,
    LifecycleError,
    NetworkError,
    NotFoundError,
    NotificationError,
    ValidationError,
)
from app.core.storage import Base, async_session, init_models

__all__ = [
    "Base",
    "ConflictError",
    "InvalidTransitionError",
    "LifecycleError",
    "NetworkError",
    "NotFoundError",
    "NotificationError",
    "ValidationError",
    "async_session",
    "init_models",
    "settings",
]
