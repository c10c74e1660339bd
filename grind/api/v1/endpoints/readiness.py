"""
Readiness endpoints.

Daily check-in upsert (last write wins), day colour and the admin
notes feed.
"""

import datetime

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from grind.api.dependencies import get_request_context
from grind.core.context import RequestContext
from grind.db.session import get_db
from grind.schemas.readiness import DayColorResponse, ReadinessLogResponse, ReadinessLogUpsert, ReadinessNoteResponse
from grind.services.readiness_service import ReadinessService

router = APIRouter()


# Declared before the /{athlete_id} routes so "recent" is not parsed as an id
@router.get("/recent", summary="Latest readiness reports across the roster.",
            response_model=list[ReadinessNoteResponse], )
def recent_notes(db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    return ReadinessService(db).recent_notes(ctx)


@router.put("/{athlete_id}/{date}", summary="Create or overwrite the readiness report for a date.",
            response_model=ReadinessLogResponse, )
def upsert_readiness(athlete_id: int, date: datetime.date, data: ReadinessLogUpsert, response: Response,
                     db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    entry, created = ReadinessService(db).upsert(ctx, athlete_id, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("/{athlete_id}/{date}/color", summary="Risk colour for one athlete on one day.",
            response_model=DayColorResponse, )
def day_color(athlete_id: int, date: datetime.date, db: Session = Depends(get_db),
              ctx: RequestContext = Depends(get_request_context), ):
    return ReadinessService(db).color_for_day(ctx, athlete_id, date)


@router.get("/{athlete_id}", summary="Readiness reports in a date range.",
            response_model=list[ReadinessLogResponse], )
def list_readiness(athlete_id: int, start: datetime.date = Query(..., description="Range start (inclusive)"),
                   end: datetime.date = Query(..., description="Range end (inclusive)"),
                   db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    return ReadinessService(db).get_range(ctx, athlete_id, start, end)
