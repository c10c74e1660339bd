"""
Assignment endpoints.

Admins assign templates to athletes by week; athletes open their
workouts from here, which starts the session.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from grind.api.dependencies import get_request_context
from grind.core.context import RequestContext
from grind.db.session import get_db
from grind.schemas.workout_assignment import AssignmentCreate, AssignmentResponse
from grind.schemas.workout_session import WorkoutDetailResponse, WorkoutSessionResponse
from grind.services.assignment_service import AssignmentService, current_week_start
from grind.services.session_service import SessionService

router = APIRouter()


@router.post("", summary="Assign a template to an athlete for a week.", response_model=AssignmentResponse,
             status_code=status.HTTP_201_CREATED, )
def create_assignment(data: AssignmentCreate, db: Session = Depends(get_db),
                      ctx: RequestContext = Depends(get_request_context), ):
    return AssignmentService(db).create(ctx, data)


@router.get("", summary="List assignments fully inside a week.", response_model=list[AssignmentResponse], )
def list_assignments(athlete_id: Optional[int] = Query(None, description="Athlete filter (admins may omit)"),
                     week_start: Optional[datetime.date] = Query(None, description="Defaults to this week's Sunday"),
                     week_end: Optional[datetime.date] = Query(None, description="Defaults to week_start + 6 days"),
                     db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    """
    Athletes calling without ``athlete_id`` get their own assignments.
    Only assignments with both bounds inside the range are returned.
    """
    if athlete_id is None and not ctx.is_admin:
        athlete_id = ctx.user_id
    return AssignmentService(db).list_for_week(ctx, athlete_id, week_start or current_week_start(), week_end)


@router.get("/{assignment_id}", summary="Get an assignment.", response_model=AssignmentResponse, )
def get_assignment(assignment_id: int, db: Session = Depends(get_db),
                   ctx: RequestContext = Depends(get_request_context), ):
    return AssignmentService(db).get_by_id(ctx, assignment_id)


@router.post("/{assignment_id}/session", summary="Get or start the session for an assignment.",
             response_model=WorkoutSessionResponse, )
def ensure_session(assignment_id: int, db: Session = Depends(get_db),
                   ctx: RequestContext = Depends(get_request_context), ):
    return SessionService(db).ensure_session(ctx, assignment_id)


@router.get("/{assignment_id}/workout", summary="Open the workout: template, exercises, session and logs.",
            response_model=WorkoutDetailResponse, )
def workout_detail(assignment_id: int, db: Session = Depends(get_db),
                   ctx: RequestContext = Depends(get_request_context), ):
    return SessionService(db).workout_detail(ctx, assignment_id)
