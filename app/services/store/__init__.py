"""Persistence collaborators for the lifecycle engine."""

from app.services.store.api_store import PlatformAPIStore
from app.services.store.base import LifecycleStore
from app.services.store.factory import create_lifecycle_store
from app.services.store.sql_store import SQLLifecycleStore

__all__ = [
    "LifecycleStore",
    "PlatformAPIStore",
    "SQLLifecycleStore",
    "create_lifecycle_store",
]
