"""
Analytics endpoints.

ACWR, weekly progress, trends and the admin week calendar.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from grind.analytics.acwr import compute_athlete_acwr, compute_roster_acwr
from grind.analytics.calendar import build_week_calendar
from grind.api.dependencies import get_request_context
from grind.core.context import RequestContext
from grind.db.session import get_db
from grind.schemas.acwr import AthleteACWRResponse
from grind.schemas.calendar import WeekCalendarResponse
from grind.schemas.progress import ProgressSummary, ProgressTrend
from grind.services.assignment_service import current_week_start
from grind.services.exercise_log_service import ExerciseLogService

router = APIRouter()


@router.get("/acwr", summary="ACWR for every active athlete.", response_model=list[AthleteACWRResponse], )
def roster_acwr(as_of: Optional[datetime.datetime] = Query(None, description="Reference instant (UTC), default now"),
                db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    ctx.require_admin("view the roster ACWR")
    return compute_roster_acwr(db, as_of)


@router.get("/acwr/{athlete_id}", summary="Session-count ACWR for one athlete.",
            response_model=AthleteACWRResponse, )
def athlete_acwr(athlete_id: int,
                 as_of: Optional[datetime.datetime] = Query(None, description="Reference instant (UTC), default now"),
                 db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    """
    acute = sessions started in the last 7 days, chronic = sessions in
    the last 28 days / 4, ratio = acute / chronic (0 when chronic is 0).
    """
    ctx.require_athlete_scope(athlete_id)
    return compute_athlete_acwr(db, athlete_id, as_of)


@router.get("/progress/{athlete_id}", summary="Workout and exercise completion for a week.",
            response_model=ProgressSummary, )
def progress_summary(athlete_id: int,
                     week_start: Optional[datetime.date] = Query(None, description="Defaults to this week's Sunday"),
                     week_end: Optional[datetime.date] = Query(None, description="Defaults to week_start + 6 days"),
                     db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    return ExerciseLogService(db).progress_summary(ctx, athlete_id, week_start or current_week_start(), week_end)


@router.get("/trends/{athlete_id}", summary="Recent weighted exercises with history.",
            response_model=list[ProgressTrend], )
def progress_trends(athlete_id: int, limit: int = Query(3, ge=1, le=10), db: Session = Depends(get_db),
                    ctx: RequestContext = Depends(get_request_context), ):
    return ExerciseLogService(db).progress_trends(ctx, athlete_id, limit)


@router.get("/calendar", summary="Roster x 7 days: readiness colours and assignments.",
            response_model=WeekCalendarResponse, )
def week_calendar(week_start: Optional[datetime.date] = Query(None, description="Defaults to this week's Sunday"),
                  db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    ctx.require_admin("view the roster calendar")
    return build_week_calendar(db, week_start or current_week_start())
