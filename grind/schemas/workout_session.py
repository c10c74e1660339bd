"""
Workout session API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from grind.models.workout_session import SessionStatus
from grind.schemas.exercise_log import ExerciseLogResponse
from grind.schemas.workout_template import TemplateExerciseResponse


class WorkoutSessionResponse(BaseModel):
    """Schema for a workout session in API responses."""

    id: int
    workout_assignment_id: int
    athlete_id: int
    status: SessionStatus
    started_at: datetime.datetime
    completed_at: Optional[datetime.datetime]

    class Config:
        from_attributes = True


class WorkoutSessionDetail(WorkoutSessionResponse):
    """Session with its recorded exercise logs."""

    logs: list[ExerciseLogResponse]


class WorkoutDetailResponse(BaseModel):
    """Everything the athlete workout screen needs in one payload.

    ``logs`` is keyed by catalog exercise id, matching
    ``exercises[*].exercise_id``.
    """

    assignment_id: int
    title: str
    category: str
    session: WorkoutSessionResponse
    exercises: list[TemplateExerciseResponse]
    logs: dict[int, ExerciseLogResponse] = Field(default_factory=dict)
