"""
Catalog endpoints.

Exercise definitions and workout templates.  Any authenticated caller
may read; writes are admin-only.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from grind.api.dependencies import get_request_context
from grind.core.context import RequestContext
from grind.db.session import get_db
from grind.schemas.exercise import ExerciseCreate, ExerciseResponse
from grind.schemas.workout_template import (TemplateExerciseCreate, WorkoutTemplateCreate, WorkoutTemplateResponse,
                                            WorkoutTemplateUpdate, )
from grind.services.catalog_service import CatalogService

router = APIRouter()


@router.post("/exercises", summary="Create an exercise definition.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def create_exercise(data: ExerciseCreate, db: Session = Depends(get_db),
                    ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).create_exercise(ctx, data)


@router.get("/exercises", summary="List exercise definitions.", response_model=list[ExerciseResponse], )
def list_exercises(db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).list_exercises(ctx)


@router.get("/exercises/{exercise_id}", summary="Get an exercise definition.", response_model=ExerciseResponse, )
def get_exercise(exercise_id: int, db: Session = Depends(get_db),
                 ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).get_exercise(ctx, exercise_id)


@router.post("/templates", summary="Create a workout template with its exercises.",
             response_model=WorkoutTemplateResponse, status_code=status.HTTP_201_CREATED, )
def create_template(data: WorkoutTemplateCreate, db: Session = Depends(get_db),
                    ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).create_template(ctx, data)


@router.get("/templates", summary="List workout templates.", response_model=list[WorkoutTemplateResponse], )
def list_templates(db: Session = Depends(get_db), ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).list_templates(ctx)


@router.get("/templates/{template_id}", summary="Get a workout template.", response_model=WorkoutTemplateResponse, )
def get_template(template_id: int, db: Session = Depends(get_db),
                 ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).get_template(ctx, template_id)


@router.put("/templates/{template_id}", summary="Update a template header and prescriptions.",
            response_model=WorkoutTemplateResponse, )
def update_template(template_id: int, data: WorkoutTemplateUpdate, db: Session = Depends(get_db),
                    ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).update_template(ctx, template_id, data)


@router.post("/templates/{template_id}/exercises", summary="Append an exercise to a template.",
             response_model=WorkoutTemplateResponse, status_code=status.HTTP_201_CREATED, )
def add_template_exercise(template_id: int, data: TemplateExerciseCreate, db: Session = Depends(get_db),
                          ctx: RequestContext = Depends(get_request_context), ):
    return CatalogService(db).add_template_exercise(ctx, template_id, data)


@router.delete("/templates/{template_id}", summary="Delete an unassigned template.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_template(template_id: int, db: Session = Depends(get_db),
                    ctx: RequestContext = Depends(get_request_context), ):
    CatalogService(db).delete_template(ctx, template_id)
