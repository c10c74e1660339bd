"""Business logic services."""

from grind.services.catalog_service import CatalogService
from grind.services.assignment_service import AssignmentService, current_week_start
from grind.services.session_service import SessionService
from grind.services.exercise_log_service import ExerciseLogService
from grind.services.readiness_service import ReadinessService

__all__ = [
    "CatalogService",
    "AssignmentService",
    "current_week_start",
    "SessionService",
    "ExerciseLogService",
    "ReadinessService",
]
