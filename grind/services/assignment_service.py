"""
Assignment service.

Binds templates to athletes for a calendar week.  The portal's week runs
Sunday to Saturday; ``week_end`` is always derived, never accepted from
the caller.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from grind.core.context import RequestContext
from grind.core.exceptions import NotFoundError, ValidationError
from grind.core.logging_config import get_logger
from grind.db.repositories.user import UserRepository
from grind.db.repositories.workout_assignment import WorkoutAssignmentRepository
from grind.db.repositories.workout_template import WorkoutTemplateRepository
from grind.models.workout_assignment import WorkoutAssignment, week_end_for
from grind.schemas.workout_assignment import AssignmentCreate, AssignmentResponse

logger = get_logger(__name__)


def current_week_start(today: Optional[datetime.date] = None) -> datetime.date:
    """The Sunday on or before ``today``."""
    today = today or datetime.date.today()
    # date.weekday(): Monday=0 ... Sunday=6
    return today - datetime.timedelta(days=(today.weekday() + 1) % 7)


class AssignmentService:
    """Service for workout assignment business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutAssignmentRepository(session)
        self.user_repo = UserRepository(session)
        self.template_repo = WorkoutTemplateRepository(session)

    def create(self, ctx: RequestContext, data: AssignmentCreate) -> AssignmentResponse:
        ctx.require_admin("assign workouts")

        if not self.user_repo.get_athlete(data.athlete_id):
            raise ValidationError(f"Unknown athlete: {data.athlete_id}")
        if not self.template_repo.get_by_id(data.template_id):
            raise ValidationError(f"Unknown workout template: {data.template_id}")

        entry = WorkoutAssignment(athlete_id=data.athlete_id, template_id=data.template_id,
                                  week_start=data.week_start, week_end=week_end_for(data.week_start), )
        entry = self.repository.create(entry)
        logger.info("Workout assigned", extra={"ctx_assignment_id": entry.id, "ctx_athlete_id": entry.athlete_id,
                                               "ctx_template_id": entry.template_id,
                                               "ctx_week_start": entry.week_start})
        return self._to_response(entry)

    def list_for_week(self, ctx: RequestContext, athlete_id: Optional[int], week_start: datetime.date,
                      week_end: Optional[datetime.date] = None, ) -> list[AssignmentResponse]:
        """Assignments fully inside ``[week_start, week_end]``.

        ``week_end`` defaults to ``week_start + 6 days``.  Assignments that
        only partially overlap the range are excluded.
        """
        if athlete_id is None:
            ctx.require_admin("list every athlete's assignments")
        else:
            ctx.require_athlete_scope(athlete_id)

        end = week_end or week_end_for(week_start)
        if end < week_start:
            raise ValidationError("week_end must not be before week_start")

        entries = self.repository.get_within_range(athlete_id, week_start, end)
        return [self._to_response(e) for e in entries]

    def get_by_id(self, ctx: RequestContext, assignment_id: int) -> AssignmentResponse:
        return self._to_response(self.get_owned(ctx, assignment_id))

    def get_owned(self, ctx: RequestContext, assignment_id: int) -> WorkoutAssignment:
        """Fetch an assignment the caller may act on."""
        entry = self.repository.get_by_id(assignment_id)
        if not entry:
            raise NotFoundError(f"Workout assignment {assignment_id} not found")
        ctx.require_athlete_scope(entry.athlete_id)
        return entry

    @staticmethod
    def _to_response(entry: WorkoutAssignment) -> AssignmentResponse:
        template = entry.template
        return AssignmentResponse(id=entry.id, athlete_id=entry.athlete_id, template_id=entry.template_id,
                                  template_title=template.title if template else "",
                                  template_category=template.category if template else "",
                                  week_start=entry.week_start, week_end=entry.week_end,
                                  created_at=entry.created_at, )
