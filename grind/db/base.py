"""
Base database configuration.

Import all models here so Alembic and ``create_all`` can see them.
"""

# Import all models for Alembic autogenerate
from grind.models.user import User  # noqa: F401
from grind.models.exercise import ExerciseDefinition  # noqa: F401
from grind.models.workout_template import TemplateExercise, WorkoutTemplate  # noqa: F401
from grind.models.workout_assignment import WorkoutAssignment  # noqa: F401
from grind.models.workout_session import WorkoutSession  # noqa: F401
from grind.models.exercise_log import ExerciseLog  # noqa: F401
from grind.models.readiness_log import ReadinessLog  # noqa: F401
