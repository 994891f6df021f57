"""API routers."""

from app.routers.applications import router as applications_router
from app.routers.tasks import router as tasks_router

__all__ = ["applications_router", "tasks_router"]
