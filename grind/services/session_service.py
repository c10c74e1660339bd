"""
Workout session service.

Sessions are created lazily the first time an athlete opens an
assignment and completed only when the caller says so; completion is
never inferred from the exercise logs.

State machine::

    (absent) --ensure_session--> in_progress --complete_session--> completed
"""

import datetime

from sqlmodel import Session

from grind.core.context import RequestContext
from grind.core.exceptions import ConflictError, NotFoundError
from grind.core.logging_config import get_logger
from grind.db.repositories.exercise_log import ExerciseLogRepository
from grind.db.repositories.workout_session import WorkoutSessionRepository
from grind.models.workout_session import SessionStatus, WorkoutSession
from grind.schemas.exercise_log import ExerciseLogResponse
from grind.schemas.workout_session import WorkoutDetailResponse, WorkoutSessionDetail, WorkoutSessionResponse
from grind.services.assignment_service import AssignmentService
from grind.services.catalog_service import CatalogService

logger = get_logger(__name__)


class SessionService:
    """Service for workout session lifecycle."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)
        self.log_repo = ExerciseLogRepository(session)
        self.assignments = AssignmentService(session)

    def ensure_session(self, ctx: RequestContext, assignment_id: int) -> WorkoutSessionResponse:
        """Return the assignment's session, creating it on first access.

        Idempotent and race-free: creation is a single insert-if-absent on
        the unique assignment key.
        """
        return WorkoutSessionResponse.model_validate(self._ensure(ctx, assignment_id))

    def complete_session(self, ctx: RequestContext, session_id: int) -> WorkoutSessionResponse:
        """Mark a session completed.  Completing it again is a no-op."""
        entry = self.get_owned(ctx, session_id)
        if entry.is_completed:
            return WorkoutSessionResponse.model_validate(entry)

        entry.status = SessionStatus.COMPLETED.value
        entry.completed_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        logger.info("Session completed", extra={"ctx_session_id": entry.id, "ctx_athlete_id": entry.athlete_id})
        return WorkoutSessionResponse.model_validate(entry)

    def get_session(self, ctx: RequestContext, session_id: int) -> WorkoutSessionDetail:
        entry = self.get_owned(ctx, session_id)
        logs = [ExerciseLogResponse.model_validate(log) for log in self.log_repo.get_by_session(entry.id)]
        return WorkoutSessionDetail(**WorkoutSessionResponse.model_validate(entry).model_dump(), logs=logs)

    def workout_detail(self, ctx: RequestContext, assignment_id: int) -> WorkoutDetailResponse:
        """Template, prescribed exercises and current logs for one assignment.

        Opening the workout is what creates the session.
        """
        entry = self._ensure(ctx, assignment_id)
        assignment = self.assignments.get_owned(ctx, assignment_id)
        template = assignment.template

        logs = {log.exercise_id: ExerciseLogResponse.model_validate(log)
                for log in self.log_repo.get_by_session(entry.id)}
        return WorkoutDetailResponse(assignment_id=assignment.id, title=template.title, category=template.category,
                                     session=WorkoutSessionResponse.model_validate(entry),
                                     exercises=[CatalogService.to_exercise_response(e) for e in template.exercises],
                                     logs=logs, )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_owned(self, ctx: RequestContext, session_id: int) -> WorkoutSession:
        """Fetch a session the caller may act on."""
        entry = self.repository.get_by_id(session_id)
        if not entry:
            raise NotFoundError(f"Workout session {session_id} not found")
        ctx.require_athlete_scope(entry.athlete_id)
        return entry

    def _ensure(self, ctx: RequestContext, assignment_id: int) -> WorkoutSession:
        assignment = self.assignments.get_owned(ctx, assignment_id)
        entry, created = self.repository.insert_if_absent(assignment.id, assignment.athlete_id,
                                                          datetime.datetime.utcnow())
        if entry is None:
            raise ConflictError(f"Session for assignment {assignment_id} could not be created")
        if created:
            logger.info("Session started", extra={"ctx_session_id": entry.id, "ctx_assignment_id": assignment.id,
                                                  "ctx_athlete_id": assignment.athlete_id})
        return entry
