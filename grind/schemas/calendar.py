"""
Admin week calendar schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel

from grind.schemas.readiness import RiskColor


class CalendarAssignment(BaseModel):
    id: int
    template_title: str


class CalendarDay(BaseModel):
    """One cell: the readiness colour plus assignments starting that day."""

    date: datetime.date
    color: RiskColor
    assignments: list[CalendarAssignment]


class CalendarRow(BaseModel):
    athlete_id: int
    athlete_name: Optional[str]
    days: list[CalendarDay]


class WeekCalendarResponse(BaseModel):
    week_start: datetime.date
    week_end: datetime.date
    athletes: list[CalendarRow]
