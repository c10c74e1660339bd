"""
Workout assignment model.

Binds a template to one athlete for one calendar week.  ``week_end`` is
always ``week_start + 6 days``; rows are not mutated after creation.
"""

import datetime
from typing import Optional

from sqlmodel import Field, Relationship, SQLModel

from grind.models.workout_template import WorkoutTemplate

WEEK_LENGTH_DAYS = 7


def week_end_for(week_start: datetime.date) -> datetime.date:
    """Last day (inclusive) of the week beginning on ``week_start``."""
    return week_start + datetime.timedelta(days=WEEK_LENGTH_DAYS - 1)


class WorkoutAssignment(SQLModel, table=True):
    """A template scheduled for an athlete during one week."""

    __tablename__ = "workout_assignments"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    template_id: int = Field(foreign_key="workout_templates.id", nullable=False, index=True)

    week_start: datetime.date = Field(nullable=False, index=True)
    week_end: datetime.date = Field(nullable=False, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    template: Optional[WorkoutTemplate] = Relationship()
