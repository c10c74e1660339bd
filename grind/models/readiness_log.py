"""
Athlete readiness log model.

Daily self-reported soreness and fatigue (1-5 each).
One entry per athlete per day (enforced by unique constraint); a second
report for the same day overwrites the first.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ReadinessLog(SQLModel, table=True):
    """Daily readiness check-in."""

    __tablename__ = "athlete_readiness_logs"
    __table_args__ = (
        UniqueConstraint("athlete_id", "log_date", name="uq_readiness_athlete_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    log_date: datetime.date = Field(nullable=False, index=True)

    soreness: int = Field(nullable=False)
    fatigue: int = Field(nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
