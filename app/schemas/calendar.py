"""Schemas for the task calendar."""

import datetime
from enum import StrEnum

from pydantic import Field

from app.schemas.application import CamelModel
from app.schemas.task import Task


class ViewMode(StrEnum):
    """Span covered by a calendar grid."""

    MONTH = "month"
    WEEK = "week"


class CalendarDay(CamelModel):
    """One cell of a calendar grid."""

    date: datetime.date
    is_current_period: bool
    tasks: list[Task] = Field(default_factory=list)


class CalendarResponse(CamelModel):
    """Calendar grid together with navigation anchors."""

    reference_date: datetime.date
    view_mode: ViewMode
    days: list[CalendarDay]
    previous_reference_date: datetime.date
    next_reference_date: datetime.date
