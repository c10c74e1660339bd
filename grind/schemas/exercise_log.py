"""
Exercise log API schemas.

No range constraints on ``sets``, ``reps`` or ``weight``: zero and
negative values are accepted and stored as submitted.
"""

import datetime
from typing import Optional

from pydantic import BaseModel


class ExerciseLogUpsert(BaseModel):
    """Latest actuals for one exercise in a session."""

    exercise_id: int
    completed: bool = False
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight: Optional[float] = None


class ExerciseLogResponse(BaseModel):
    id: int
    workout_session_id: int
    exercise_id: int
    completed: bool
    sets: Optional[int]
    reps: Optional[int]
    weight: Optional[float]
    logged_at: datetime.datetime

    class Config:
        from_attributes = True
