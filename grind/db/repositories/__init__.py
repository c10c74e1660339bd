"""Database repositories."""

from grind.db.repositories.user import UserRepository
from grind.db.repositories.exercise import ExerciseRepository
from grind.db.repositories.workout_template import WorkoutTemplateRepository
from grind.db.repositories.workout_assignment import WorkoutAssignmentRepository
from grind.db.repositories.workout_session import WorkoutSessionRepository
from grind.db.repositories.exercise_log import ExerciseLogRepository
from grind.db.repositories.readiness_log import ReadinessLogRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "WorkoutTemplateRepository",
    "WorkoutAssignmentRepository",
    "WorkoutSessionRepository",
    "ExerciseLogRepository",
    "ReadinessLogRepository",
]
