"""
Readiness service.

Daily soreness/fatigue check-ins.  Policy for repeated reports on the
same day is **last write wins**: the existing row is overwritten.
"""

import datetime

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from grind.analytics.readiness import color_for_log
from grind.core.config import settings
from grind.core.context import RequestContext
from grind.core.exceptions import ConflictError, ValidationError
from grind.db.repositories.readiness_log import ReadinessLogRepository
from grind.db.repositories.user import UserRepository
from grind.models.readiness_log import ReadinessLog
from grind.schemas.readiness import (DayColorResponse, ReadinessLogResponse, ReadinessLogUpsert,
                                     ReadinessNoteResponse, )


class ReadinessService:
    """Service for readiness check-ins and day colouring."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ReadinessLogRepository(session)
        self.user_repo = UserRepository(session)

    def upsert(self, ctx: RequestContext, athlete_id: int, log_date: datetime.date,
               data: ReadinessLogUpsert, ) -> tuple[ReadinessLogResponse, bool]:
        """Create or overwrite the athlete's report for ``log_date``.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        ctx.require_athlete_scope(athlete_id)
        if not self.user_repo.get_athlete(athlete_id):
            raise ValidationError(f"Unknown athlete: {athlete_id}")

        existing = self.repository.get_by_athlete_and_date(athlete_id, log_date)
        if existing:
            return ReadinessLogResponse.model_validate(self._overwrite(existing, data)), False

        entry = ReadinessLog(athlete_id=athlete_id, log_date=log_date, soreness=data.soreness, fatigue=data.fatigue,
                             notes=data.notes, )
        try:
            entry = self.repository.create(entry)
        except IntegrityError:
            # A concurrent first report for the same day won the insert
            self.session.rollback()
            existing = self.repository.get_by_athlete_and_date(athlete_id, log_date)
            if existing is None:
                raise ConflictError(f"Readiness report for {log_date} could not be stored")
            return ReadinessLogResponse.model_validate(self._overwrite(existing, data)), False
        return ReadinessLogResponse.model_validate(entry), True

    def color_for_day(self, ctx: RequestContext, athlete_id: int, day: datetime.date) -> DayColorResponse:
        ctx.require_athlete_scope(athlete_id)
        entry = self.repository.get_by_athlete_and_date(athlete_id, day)
        return DayColorResponse(athlete_id=athlete_id, date=day, color=color_for_log(entry))

    def get_range(self, ctx: RequestContext, athlete_id: int, start: datetime.date,
                  end: datetime.date, ) -> list[ReadinessLogResponse]:
        ctx.require_athlete_scope(athlete_id)
        if end < start:
            raise ValidationError("end must not be before start")
        entries = self.repository.get_by_athlete_date_range(athlete_id, start, end)
        return [ReadinessLogResponse.model_validate(e) for e in entries]

    def recent_notes(self, ctx: RequestContext) -> list[ReadinessNoteResponse]:
        """Latest reports across the roster (admin notes feed)."""
        ctx.require_admin("read the readiness notes feed")
        rows = self.repository.get_recent_with_names(settings.READINESS_FEED_LIMIT)
        return [
            ReadinessNoteResponse(id=entry.id, athlete_id=entry.athlete_id, athlete_name=name,
                                  log_date=entry.log_date, soreness=entry.soreness, fatigue=entry.fatigue,
                                  notes=entry.notes, )
            for entry, name in rows
        ]

    def _overwrite(self, entry: ReadinessLog, data: ReadinessLogUpsert) -> ReadinessLog:
        entry.soreness = data.soreness
        entry.fatigue = data.fatigue
        entry.notes = data.notes
        entry.updated_at = datetime.datetime.utcnow()
        return self.repository.update(entry)
