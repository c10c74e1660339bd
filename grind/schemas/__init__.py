"""Pydantic schemas for request/response validation."""

from grind.schemas.exercise import ExerciseCreate, ExerciseResponse
from grind.schemas.workout_template import (
    TemplateExerciseCreate,
    TemplateExerciseUpdate,
    TemplateExerciseResponse,
    WorkoutTemplateCreate,
    WorkoutTemplateUpdate,
    WorkoutTemplateResponse,
)
from grind.schemas.workout_assignment import AssignmentCreate, AssignmentResponse
from grind.schemas.exercise_log import ExerciseLogUpsert, ExerciseLogResponse
from grind.schemas.workout_session import (
    WorkoutSessionResponse,
    WorkoutSessionDetail,
    WorkoutDetailResponse,
)
from grind.schemas.readiness import (
    RiskColor,
    ReadinessLogUpsert,
    ReadinessLogResponse,
    DayColorResponse,
    ReadinessNoteResponse,
)
from grind.schemas.acwr import ACWRFlag, ACWRResult, AthleteACWRResponse
from grind.schemas.progress import ProgressSummary, ProgressTrend
from grind.schemas.calendar import CalendarAssignment, CalendarDay, CalendarRow, WeekCalendarResponse

__all__ = [
    "ExerciseCreate",
    "ExerciseResponse",
    "TemplateExerciseCreate",
    "TemplateExerciseUpdate",
    "TemplateExerciseResponse",
    "WorkoutTemplateCreate",
    "WorkoutTemplateUpdate",
    "WorkoutTemplateResponse",
    "AssignmentCreate",
    "AssignmentResponse",
    "ExerciseLogUpsert",
    "ExerciseLogResponse",
    "WorkoutSessionResponse",
    "WorkoutSessionDetail",
    "WorkoutDetailResponse",
    "RiskColor",
    "ReadinessLogUpsert",
    "ReadinessLogResponse",
    "DayColorResponse",
    "ReadinessNoteResponse",
    "ACWRFlag",
    "ACWRResult",
    "AthleteACWRResponse",
    "ProgressSummary",
    "ProgressTrend",
    "CalendarAssignment",
    "CalendarDay",
    "CalendarRow",
    "WeekCalendarResponse",
]
