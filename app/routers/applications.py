"""API routes for applications, interviews and hired-candidate views."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.exceptions import LifecycleError, to_http_exception
from app.schemas.application import (
    Application,
    Interview,
    InterviewSlot,
    TransitionContext,
    TransitionRequest,
    TransitionResult,
)
from app.schemas.calendar import CalendarResponse, ViewMode
from app.schemas.task import ProgressResponse, Task, TaskCreate
from app.services.application_service import ApplicationStateMachine
from app.services.dependencies import (
    get_interview_scheduler,
    get_lifecycle_store,
    get_state_machine,
    get_task_manager,
)
from app.services.interview_service import InterviewScheduler
from app.services.store.base import LifecycleStore
from app.services.task_service import TaskLifecycleManager
from app.utils.calendar_grid import build_grid, shift_reference_date
from app.utils.progress import (
    calculate_overall_task_progress,
    get_task_breakdown,
    get_task_status_counts,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[Application])
async def list_applications(
    candidate_id: str | None = Query(default=None),
    unit_id: str | None = Query(default=None),
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """List the applications of a candidate or of a unit."""
    if candidate_id is None and unit_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Either candidate_id or unit_id is required",
        )
    try:
        return await store.list_applications(candidate_id=candidate_id, unit_id=unit_id)
    except LifecycleError as e:
        logger.error(f"Failed to list applications: {e.message}")
        raise to_http_exception(e)


@router.get("/{application_id}", response_model=Application)
async def get_application(
    application_id: str,
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """Get a single application."""
    try:
        return await store.get_application(application_id)
    except LifecycleError as e:
        raise to_http_exception(e)


@router.post("/{application_id}/transition", response_model=TransitionResult)
async def transition_application(
    application_id: str,
    request: TransitionRequest,
    store: LifecycleStore = Depends(get_lifecycle_store),
    machine: ApplicationStateMachine = Depends(get_state_machine),
):
    """Move an application to another status."""
    try:
        application = await store.get_application(application_id)
        context = TransitionContext.model_validate(
            request.model_dump(exclude={"target_status"})
        )
        return await machine.transition(application, request.target_status, context)
    except LifecycleError as e:
        logger.error(f"Transition of application {application_id} failed: {e.message}")
        raise to_http_exception(e)


@router.post("/{application_id}/interview", response_model=TransitionResult)
async def schedule_interview(
    application_id: str,
    request: InterviewSlot,
    scheduler: InterviewScheduler = Depends(get_interview_scheduler),
):
    """Schedule or reschedule an interview."""
    try:
        return await scheduler.schedule(application_id, request.date_time, request)
    except LifecycleError as e:
        logger.error(f"Scheduling interview for {application_id} failed: {e.message}")
        raise to_http_exception(e)


@router.get("/{application_id}/interviews", response_model=list[Interview])
async def list_interviews(
    application_id: str,
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """List the interview bookings of an application."""
    try:
        await store.get_application(application_id)
        return await store.list_interviews(application_id)
    except LifecycleError as e:
        raise to_http_exception(e)


@router.get("/{application_id}/tasks", response_model=list[Task])
async def list_tasks(
    application_id: str,
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """List the tasks of an application."""
    try:
        return await store.list_tasks(application_id)
    except LifecycleError as e:
        raise to_http_exception(e)


@router.post(
    "/{application_id}/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    application_id: str,
    request: TaskCreate,
    manager: TaskLifecycleManager = Depends(get_task_manager),
):
    """Assign a new task to a hired candidate."""
    try:
        return await manager.create(
            application_id,
            title=request.title,
            description=request.description,
            start_date=request.start_date,
            end_date=request.end_date,
            color=request.color,
        )
    except LifecycleError as e:
        logger.error(f"Creating task for {application_id} failed: {e.message}")
        raise to_http_exception(e)


@router.get("/{application_id}/progress", response_model=ProgressResponse)
async def get_progress(
    application_id: str,
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """Get task progress of a hired application."""
    try:
        tasks = await store.list_tasks(application_id)
    except LifecycleError as e:
        raise to_http_exception(e)

    return ProgressResponse(
        application_id=application_id,
        progress=calculate_overall_task_progress(tasks),
        breakdown=get_task_breakdown(tasks),
        counts=get_task_status_counts(tasks),
    )


@router.get("/{application_id}/calendar", response_model=CalendarResponse)
async def get_calendar(
    application_id: str,
    reference_date: date | None = Query(default=None),
    view_mode: ViewMode = Query(default=ViewMode.MONTH),
    store: LifecycleStore = Depends(get_lifecycle_store),
):
    """Get the month or week calendar of an application's tasks."""
    reference = reference_date or date.today()
    try:
        tasks = await store.list_tasks(application_id)
        days = build_grid(reference, view_mode, tasks)
    except LifecycleError as e:
        raise to_http_exception(e)

    return CalendarResponse(
        reference_date=reference,
        view_mode=view_mode,
        days=days,
        previous_reference_date=shift_reference_date(reference, view_mode, -1),
        next_reference_date=shift_reference_date(reference, view_mode, 1),
    )
