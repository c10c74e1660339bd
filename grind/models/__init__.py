"""SQLModel database models."""

from grind.models.user import User
from grind.models.exercise import ExerciseDefinition
from grind.models.workout_template import TemplateExercise, WorkoutTemplate
from grind.models.workout_assignment import WorkoutAssignment
from grind.models.workout_session import SessionStatus, WorkoutSession
from grind.models.exercise_log import ExerciseLog
from grind.models.readiness_log import ReadinessLog

__all__ = [
    "User",
    "ExerciseDefinition",
    "WorkoutTemplate",
    "TemplateExercise",
    "WorkoutAssignment",
    "SessionStatus",
    "WorkoutSession",
    "ExerciseLog",
    "ReadinessLog",
]
