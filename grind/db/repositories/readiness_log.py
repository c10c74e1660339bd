"""
Readiness log repository.

Single-row lookups order by most recent write so that, should duplicate
(athlete, date) rows ever exist (e.g. legacy imports made before the
unique constraint), the latest report wins.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from grind.models.readiness_log import ReadinessLog
from grind.models.user import User


class ReadinessLogRepository:
    """Repository for ReadinessLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: ReadinessLog) -> ReadinessLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def update(self, entry: ReadinessLog) -> ReadinessLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_athlete_and_date(self, athlete_id: int, log_date: datetime.date, ) -> Optional[ReadinessLog]:
        """The latest report for an athlete on a specific date."""
        statement = (select(ReadinessLog).where(ReadinessLog.athlete_id == athlete_id,
                                                ReadinessLog.log_date == log_date, ).order_by(
            ReadinessLog.updated_at.desc(), ReadinessLog.id.desc()))
        return self.session.exec(statement).first()

    def get_by_athlete_date_range(self, athlete_id: int, start: datetime.date,
                                  end: datetime.date, ) -> list[ReadinessLog]:
        """Entries for an athlete within a date range (inclusive)."""
        statement = (select(ReadinessLog).where(ReadinessLog.athlete_id == athlete_id,
                                                ReadinessLog.log_date >= start,
                                                ReadinessLog.log_date <= end, ).order_by(ReadinessLog.log_date))
        return list(self.session.exec(statement).all())

    def get_by_date_range(self, start: datetime.date, end: datetime.date, ) -> list[ReadinessLog]:
        """Entries for every athlete within a date range, oldest write first."""
        statement = (select(ReadinessLog).where(ReadinessLog.log_date >= start, ReadinessLog.log_date <= end, )
                     .order_by(ReadinessLog.log_date, ReadinessLog.updated_at, ReadinessLog.id))
        return list(self.session.exec(statement).all())

    def get_recent_with_names(self, limit: int = 50) -> list[tuple[ReadinessLog, Optional[str]]]:
        """Latest reports across the roster with the athlete's display name."""
        statement = (select(ReadinessLog, User.full_name)
                     .join(User, User.id == ReadinessLog.athlete_id)
                     .order_by(ReadinessLog.log_date.desc(), ReadinessLog.id.desc())
                     .limit(limit))
        return [(entry, name) for entry, name in self.session.exec(statement).all()]
