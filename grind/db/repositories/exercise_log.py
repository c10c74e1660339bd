"""
Exercise log repository.

Writes go through ``upsert``: one ``INSERT ... ON CONFLICT DO UPDATE`` on
the (session, exercise) key, so retries and repeated saves leave exactly
one row holding the latest values.
"""

import datetime
from typing import Iterable, Optional

from sqlmodel import Session, select

from grind.db.upsert import dialect_insert
from grind.models.exercise import ExerciseDefinition
from grind.models.exercise_log import ExerciseLog
from grind.models.workout_session import WorkoutSession


class ExerciseLogRepository:
    """Repository for ExerciseLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def upsert(self, session_id: int, exercise_id: int, completed: bool, sets: Optional[int],
               reps: Optional[int], weight: Optional[float], logged_at: datetime.datetime, ) -> ExerciseLog:
        insert = dialect_insert(self.session, ExerciseLog)
        statement = (
            insert.values(workout_session_id=session_id, exercise_id=exercise_id, completed=completed, sets=sets,
                          reps=reps, weight=weight, logged_at=logged_at, )
            .on_conflict_do_update(
                index_elements=["workout_session_id", "exercise_id"],
                set_={
                    "completed": insert.excluded.completed,
                    "sets": insert.excluded.sets,
                    "reps": insert.excluded.reps,
                    "weight": insert.excluded.weight,
                    "logged_at": insert.excluded.logged_at,
                },
            )
        )
        self.session.connection().execute(statement)
        self.session.commit()
        return self.get_by_session_and_exercise(session_id, exercise_id)

    def get_by_session_and_exercise(self, session_id: int, exercise_id: int) -> Optional[ExerciseLog]:
        statement = select(ExerciseLog).where(ExerciseLog.workout_session_id == session_id,
                                              ExerciseLog.exercise_id == exercise_id, )
        return self.session.exec(statement).first()

    def get_by_session(self, session_id: int) -> list[ExerciseLog]:
        statement = (select(ExerciseLog).where(ExerciseLog.workout_session_id == session_id).order_by(
            ExerciseLog.id))
        return list(self.session.exec(statement).all())

    def get_by_sessions(self, session_ids: Iterable[int]) -> list[ExerciseLog]:
        ids = list(session_ids)
        if not ids:
            return []
        statement = select(ExerciseLog).where(ExerciseLog.workout_session_id.in_(ids))
        return list(self.session.exec(statement).all())

    def get_recent_weighted(self, athlete_id: int, limit: int = 50, ) -> list[tuple[ExerciseLog, str]]:
        """Most recent logs carrying a weight, with the exercise name, newest first."""
        statement = (select(ExerciseLog, ExerciseDefinition.name)
                     .join(WorkoutSession, WorkoutSession.id == ExerciseLog.workout_session_id)
                     .join(ExerciseDefinition, ExerciseDefinition.id == ExerciseLog.exercise_id)
                     .where(WorkoutSession.athlete_id == athlete_id, ExerciseLog.weight.is_not(None), )
                     .order_by(ExerciseLog.logged_at.desc(), ExerciseLog.id.desc())
                     .limit(limit))
        return [(log, name) for log, name in self.session.exec(statement).all()]
