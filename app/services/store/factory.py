"""Factory for creating lifecycle stores."""

from app.core.config import settings
from app.services.store.api_store import PlatformAPIStore
from app.services.store.base import LifecycleStore
from app.services.store.sql_store import SQLLifecycleStore


def create_lifecycle_store() -> LifecycleStore:
    """Get the configured lifecycle store instance."""
    if settings.store_backend == "database":
        return SQLLifecycleStore()
    if settings.store_backend == "api":
        return PlatformAPIStore()
    raise ValueError(f"Unknown store backend: {settings.store_backend}")
