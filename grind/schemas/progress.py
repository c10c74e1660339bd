"""
Athlete progress schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel


class ProgressSummary(BaseModel):
    """Completion counts for one athlete's week (counts, never ratios)."""

    workouts_completed: int = 0
    workouts_total: int = 0
    exercises_completed: int = 0
    exercises_total: int = 0


class ProgressTrend(BaseModel):
    """Latest weighted log of an exercise that has at least one earlier one."""

    exercise_id: int
    exercise_name: str
    weight: Optional[float]
    reps: Optional[int]
    logged_at: datetime.datetime
