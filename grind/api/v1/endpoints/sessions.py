"""
Workout session endpoints.

Completion and per-exercise logging for sessions already started from
an assignment.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from grind.api.dependencies import get_request_context
from grind.core.context import RequestContext
from grind.db.session import get_db
from grind.schemas.exercise_log import ExerciseLogResponse, ExerciseLogUpsert
from grind.schemas.workout_session import WorkoutSessionDetail, WorkoutSessionResponse
from grind.services.exercise_log_service import ExerciseLogService
from grind.services.session_service import SessionService

router = APIRouter()


@router.get("/{session_id}", summary="Get a session with its logs.", response_model=WorkoutSessionDetail, )
def get_session(session_id: int, db: Session = Depends(get_db),
                ctx: RequestContext = Depends(get_request_context), ):
    return SessionService(db).get_session(ctx, session_id)


@router.post("/{session_id}/complete", summary="Mark a session completed.", response_model=WorkoutSessionResponse, )
def complete_session(session_id: int, db: Session = Depends(get_db),
                     ctx: RequestContext = Depends(get_request_context), ):
    return SessionService(db).complete_session(ctx, session_id)


@router.put("/{session_id}/logs", summary="Create or overwrite an exercise log.", response_model=ExerciseLogResponse, )
def upsert_log(session_id: int, data: ExerciseLogUpsert, db: Session = Depends(get_db),
               ctx: RequestContext = Depends(get_request_context), ):
    return ExerciseLogService(db).upsert(ctx, session_id, data)


@router.get("/{session_id}/logs", summary="List a session's exercise logs.",
            response_model=list[ExerciseLogResponse], )
def list_logs(session_id: int, db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    return ExerciseLogService(db).list_logs(ctx, session_id)
