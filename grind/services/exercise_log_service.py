"""
Exercise log service.

Records per-exercise actuals inside a session and aggregates weekly
progress.  Values are stored as submitted; there is no range validation
on sets, reps or weight.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from grind.analytics.progress import select_trends, summarize_progress
from grind.core.context import RequestContext
from grind.core.exceptions import ValidationError
from grind.db.repositories.exercise import ExerciseRepository
from grind.db.repositories.exercise_log import ExerciseLogRepository
from grind.db.repositories.workout_assignment import WorkoutAssignmentRepository
from grind.db.repositories.workout_session import WorkoutSessionRepository
from grind.models.workout_assignment import week_end_for
from grind.schemas.exercise_log import ExerciseLogResponse, ExerciseLogUpsert
from grind.schemas.progress import ProgressSummary, ProgressTrend
from grind.services.session_service import SessionService

# How many recent weighted logs the trend view looks at
TREND_WINDOW = 50


class ExerciseLogService:
    """Service for exercise logs and progress aggregation."""

    def __init__(self, session: Session):
        self.repository = ExerciseLogRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.assignment_repo = WorkoutAssignmentRepository(session)
        self.session_repo = WorkoutSessionRepository(session)
        self.sessions = SessionService(session)

    def upsert(self, ctx: RequestContext, session_id: int, data: ExerciseLogUpsert) -> ExerciseLogResponse:
        """Write or overwrite the log for (session, exercise)."""
        entry = self.sessions.get_owned(ctx, session_id)
        if not self.exercise_repo.get_by_id(data.exercise_id):
            raise ValidationError(f"Unknown exercise: {data.exercise_id}")

        log = self.repository.upsert(session_id=entry.id, exercise_id=data.exercise_id, completed=data.completed,
                                     sets=data.sets, reps=data.reps, weight=data.weight,
                                     logged_at=datetime.datetime.utcnow(), )
        return ExerciseLogResponse.model_validate(log)

    def list_logs(self, ctx: RequestContext, session_id: int) -> list[ExerciseLogResponse]:
        entry = self.sessions.get_owned(ctx, session_id)
        return [ExerciseLogResponse.model_validate(log) for log in self.repository.get_by_session(entry.id)]

    def progress_summary(self, ctx: RequestContext, athlete_id: int, week_start: datetime.date,
                         week_end: Optional[datetime.date] = None, ) -> ProgressSummary:
        """Workout and exercise completion counts for an athlete's week.

        Uses the same exact-bounds week filter as the assignment list.
        A week without assignments yields all zeros.
        """
        ctx.require_athlete_scope(athlete_id)
        end = week_end or week_end_for(week_start)
        if end < week_start:
            raise ValidationError("week_end must not be before week_start")

        assignments = self.assignment_repo.get_within_range(athlete_id, week_start, end)
        if not assignments:
            return ProgressSummary()

        sessions = self.session_repo.get_by_assignments(a.id for a in assignments)
        logs = self.repository.get_by_sessions(s.id for s in sessions)
        return summarize_progress(assignment_count=len(assignments), session_statuses=(s.status for s in sessions),
                                  log_completed_flags=(log.completed for log in logs), )

    def progress_trends(self, ctx: RequestContext, athlete_id: int, limit: int = 3) -> list[ProgressTrend]:
        """Recent weighted exercises that have an earlier log to compare to."""
        ctx.require_athlete_scope(athlete_id)
        rows = self.repository.get_recent_weighted(athlete_id, TREND_WINDOW)
        return select_trends(rows, limit)
