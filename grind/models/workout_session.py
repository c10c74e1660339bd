"""
Workout session model.

A session is the tracked execution of one assignment.  The unique
constraint on ``workout_assignment_id`` is what makes "create if absent"
a single atomic write.

State machine::

    (absent) --ensure--> in_progress --complete--> completed
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class SessionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class WorkoutSession(SQLModel, table=True):
    """Execution state of an assignment, owned 1:1 by it."""

    __tablename__ = "workout_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_assignment_id: int = Field(foreign_key="workout_assignments.id", nullable=False, unique=True)

    # Copied from the assignment so load queries need no join
    athlete_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    status: str = Field(default=SessionStatus.IN_PROGRESS.value, max_length=20, nullable=False)
    started_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
    completed_at: Optional[datetime.datetime] = Field(default=None)

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED.value
