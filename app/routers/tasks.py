"""API routes for task submission and review."""

import logging

from fastapi import APIRouter, Depends

from app.core.exceptions import LifecycleError, to_http_exception
from app.schemas.task import Task, TaskReviewRequest, TaskSubmitRequest
from app.services.dependencies import get_lifecycle_store, get_task_manager
from app.services.store.base import LifecycleStore
from app.services.task_service import TaskLifecycleManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """Get a single task."""
    try:
        return await store.get_task(task_id)
    except LifecycleError as e:
        raise to_http_exception(e)


@router.post("/{task_id}/submit", response_model=Task)
async def submit_task(
    task_id: str,
    request: TaskSubmitRequest,
    manager: TaskLifecycleManager = Depends(get_task_manager),
):
    """Submit work for a task."""
    try:
        return await manager.submit(task_id, request.submission_link)
    except LifecycleError as e:
        logger.error(f"Submitting task {task_id} failed: {e.message}")
        raise to_http_exception(e)


@router.post("/{task_id}/review", response_model=Task)
async def review_task(
    task_id: str,
    request: TaskReviewRequest,
    manager: TaskLifecycleManager = Depends(get_task_manager),
):
    """Accept a submitted task or send it back for redo."""
    try:
        return await manager.review(task_id, request.decision, request.remarks)
    except LifecycleError as e:
        logger.error(f"Reviewing task {task_id} failed: {e.message}")
        raise to_http_exception(e)
