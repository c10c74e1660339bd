"""
Exercise log model.

Actual performance of one exercise within one session.  One row per
(session, exercise), enforced by unique constraint; later writes
overwrite the row in place.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ExerciseLog(SQLModel, table=True):
    """Per-exercise actuals recorded by the athlete during a session.

    ``sets``, ``reps`` and ``weight`` are stored exactly as submitted;
    no range checks are applied.
    """

    __tablename__ = "exercise_logs"
    __table_args__ = (
        UniqueConstraint("workout_session_id", "exercise_id", name="uq_exercise_log_session_exercise"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_session_id: int = Field(foreign_key="workout_sessions.id", nullable=False, index=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)

    completed: bool = Field(default=False, nullable=False)
    sets: Optional[int] = Field(default=None)
    reps: Optional[int] = Field(default=None)
    weight: Optional[float] = Field(default=None)

    logged_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
