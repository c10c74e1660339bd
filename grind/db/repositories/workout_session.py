"""
Workout session repository.

``insert_if_absent`` is the only way sessions are created: a single
``INSERT ... ON CONFLICT (workout_assignment_id) DO NOTHING`` followed by
a fetch of the surviving row.  Concurrent callers racing on the same
assignment all end up with the same session.
"""

import datetime
from typing import Iterable, Optional

from sqlmodel import Session, select

from grind.db.upsert import dialect_insert
from grind.models.workout_session import SessionStatus, WorkoutSession


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def insert_if_absent(self, assignment_id: int, athlete_id: int,
                         started_at: datetime.datetime, ) -> tuple[WorkoutSession, bool]:
        """Create the assignment's session unless one exists.

        Returns:
            Tuple of (session, created).
        """
        statement = (
            dialect_insert(self.session, WorkoutSession)
            .values(workout_assignment_id=assignment_id, athlete_id=athlete_id,
                    status=SessionStatus.IN_PROGRESS.value, started_at=started_at, completed_at=None, )
            .on_conflict_do_nothing(index_elements=["workout_assignment_id"])
        )
        result = self.session.connection().execute(statement)
        self.session.commit()
        created = result.rowcount == 1
        return self.get_by_assignment(assignment_id), created

    def get_by_id(self, session_id: int) -> Optional[WorkoutSession]:
        return self.session.get(WorkoutSession, session_id)

    def get_by_assignment(self, assignment_id: int) -> Optional[WorkoutSession]:
        statement = select(WorkoutSession).where(WorkoutSession.workout_assignment_id == assignment_id)
        return self.session.exec(statement).first()

    def get_by_assignments(self, assignment_ids: Iterable[int]) -> list[WorkoutSession]:
        ids = list(assignment_ids)
        if not ids:
            return []
        statement = select(WorkoutSession).where(WorkoutSession.workout_assignment_id.in_(ids))
        return list(self.session.exec(statement).all())

    def update(self, entry: WorkoutSession) -> WorkoutSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    # ------------------------------------------------------------------
    # Load-window queries for ACWR
    # ------------------------------------------------------------------

    def get_start_times(self, athlete_id: int, start: datetime.datetime,
                        end: datetime.datetime, ) -> list[datetime.datetime]:
        """Start timestamps of an athlete's sessions within ``[start, end]``."""
        statement = (select(WorkoutSession.started_at).where(WorkoutSession.athlete_id == athlete_id,
                                                             WorkoutSession.started_at >= start,
                                                             WorkoutSession.started_at <= end, ).order_by(
            WorkoutSession.started_at))
        return list(self.session.exec(statement).all())

    def get_start_times_by_athlete(self, start: datetime.datetime,
                                   end: datetime.datetime, ) -> dict[int, list[datetime.datetime]]:
        """Start timestamps within ``[start, end]`` for every athlete, grouped by athlete id."""
        statement = (select(WorkoutSession.athlete_id, WorkoutSession.started_at).where(
            WorkoutSession.started_at >= start, WorkoutSession.started_at <= end, ).order_by(
            WorkoutSession.started_at))
        grouped: dict[int, list[datetime.datetime]] = {}
        for athlete_id, started_at in self.session.exec(statement).all():
            grouped.setdefault(athlete_id, []).append(started_at)
        return grouped
