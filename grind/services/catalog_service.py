"""
Catalog service.

Exercise definitions and workout templates.  Reads are open to any
authenticated caller; every write is admin-only.
"""

import datetime

from sqlmodel import Session

from grind.core.context import RequestContext
from grind.core.exceptions import ConflictError, NotFoundError, ValidationError
from grind.core.logging_config import get_logger
from grind.db.repositories.exercise import ExerciseRepository
from grind.db.repositories.workout_assignment import WorkoutAssignmentRepository
from grind.db.repositories.workout_template import WorkoutTemplateRepository
from grind.models.exercise import ExerciseDefinition
from grind.models.workout_template import TemplateExercise, WorkoutTemplate
from grind.schemas.exercise import ExerciseCreate, ExerciseResponse
from grind.schemas.workout_template import (TemplateExerciseCreate, TemplateExerciseResponse, WorkoutTemplateCreate,
                                            WorkoutTemplateResponse, WorkoutTemplateUpdate, )

logger = get_logger(__name__)


class CatalogService:
    """Service for exercise catalog and template management."""

    def __init__(self, session: Session):
        self.exercise_repo = ExerciseRepository(session)
        self.template_repo = WorkoutTemplateRepository(session)
        self.assignment_repo = WorkoutAssignmentRepository(session)

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def create_exercise(self, ctx: RequestContext, data: ExerciseCreate) -> ExerciseResponse:
        ctx.require_admin("manage the exercise catalog")
        name = data.name.strip()
        category = data.category.strip()
        if not name:
            raise ValidationError("Exercise name must not be empty")
        if not category:
            raise ValidationError("Exercise category must not be empty")

        entry = ExerciseDefinition(name=name, category=category, description=data.description or None)
        entry = self.exercise_repo.create(entry)
        logger.info("Exercise created", extra={"ctx_exercise_id": entry.id, "ctx_admin_id": ctx.user_id})
        return ExerciseResponse.model_validate(entry)

    def list_exercises(self, ctx: RequestContext) -> list[ExerciseResponse]:
        return [ExerciseResponse.model_validate(e) for e in self.exercise_repo.get_all()]

    def get_exercise(self, ctx: RequestContext, exercise_id: int) -> ExerciseResponse:
        entry = self.exercise_repo.get_by_id(exercise_id)
        if not entry:
            raise NotFoundError(f"Exercise {exercise_id} not found")
        return ExerciseResponse.model_validate(entry)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def create_template(self, ctx: RequestContext, data: WorkoutTemplateCreate) -> WorkoutTemplateResponse:
        ctx.require_admin("manage workout templates")
        title, category = self._clean_header(data.title, data.category)
        self._require_exercises(item.exercise_id for item in data.exercises)

        template = WorkoutTemplate(title=title, category=category)
        template.exercises = [self._new_entry(item, index) for index, item in enumerate(data.exercises)]
        template = self.template_repo.create(template)
        logger.info("Template created", extra={"ctx_template_id": template.id,
                                               "ctx_exercise_count": len(template.exercises)})
        return self._to_response(template)

    def add_template_exercise(self, ctx: RequestContext, template_id: int,
                              data: TemplateExerciseCreate, ) -> WorkoutTemplateResponse:
        ctx.require_admin("manage workout templates")
        template = self._get_template(template_id)
        self._require_exercises([data.exercise_id])

        entry = self._new_entry(data, self.template_repo.next_sort_order(template.id))
        entry.template_id = template.id
        self.template_repo.add_exercise(entry)
        return self._to_response(self._get_template(template_id))

    def update_template(self, ctx: RequestContext, template_id: int,
                        data: WorkoutTemplateUpdate, ) -> WorkoutTemplateResponse:
        ctx.require_admin("manage workout templates")
        template = self._get_template(template_id)

        if data.title is not None or data.category is not None:
            title, category = self._clean_header(data.title if data.title is not None else template.title,
                                                 data.category if data.category is not None else template.category)
            template.title = title
            template.category = category

        entries = {entry.id: entry for entry in template.exercises}
        for change in data.exercises:
            entry = entries.get(change.id)
            if entry is None:
                raise ValidationError(f"Template exercise {change.id} does not belong to template {template_id}")
            entry.prescribed_sets = change.prescribed_sets
            entry.prescribed_reps = change.prescribed_reps
            entry.prescribed_weight = change.prescribed_weight
            entry.notes = change.notes

        template.updated_at = datetime.datetime.utcnow()
        template = self.template_repo.update(template)
        return self._to_response(template)

    def delete_template(self, ctx: RequestContext, template_id: int) -> None:
        ctx.require_admin("manage workout templates")
        self._get_template(template_id)
        in_use = self.assignment_repo.count_by_template(template_id)
        if in_use:
            raise ConflictError(f"Template {template_id} is referenced by {in_use} assignment(s)")
        self.template_repo.delete(template_id)
        logger.info("Template deleted", extra={"ctx_template_id": template_id, "ctx_admin_id": ctx.user_id})

    def list_templates(self, ctx: RequestContext) -> list[WorkoutTemplateResponse]:
        return [self._to_response(t) for t in self.template_repo.get_all()]

    def get_template(self, ctx: RequestContext, template_id: int) -> WorkoutTemplateResponse:
        return self._to_response(self._get_template(template_id))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_template(self, template_id: int) -> WorkoutTemplate:
        template = self.template_repo.get_by_id(template_id)
        if not template:
            raise NotFoundError(f"Workout template {template_id} not found")
        return template

    def _require_exercises(self, exercise_ids) -> None:
        ids = list(exercise_ids)
        known = self.exercise_repo.get_many(ids)
        missing = sorted({i for i in ids if i not in known})
        if missing:
            raise ValidationError(f"Unknown exercise id(s): {missing}")

    @staticmethod
    def _clean_header(title: str, category: str) -> tuple[str, str]:
        title = title.strip()
        category = category.strip()
        if not title:
            raise ValidationError("Template title must not be empty")
        if not category:
            raise ValidationError("Template category must not be empty")
        return title, category

    @staticmethod
    def _new_entry(item: TemplateExerciseCreate, sort_order: int) -> TemplateExercise:
        return TemplateExercise(exercise_id=item.exercise_id, sort_order=sort_order,
                                prescribed_sets=item.prescribed_sets, prescribed_reps=item.prescribed_reps,
                                prescribed_weight=item.prescribed_weight, notes=item.notes or None, )

    @staticmethod
    def to_exercise_response(entry: TemplateExercise) -> TemplateExerciseResponse:
        return TemplateExerciseResponse(id=entry.id, exercise_id=entry.exercise_id,
                                        exercise_name=entry.exercise.name if entry.exercise else "",
                                        sort_order=entry.sort_order, prescribed_sets=entry.prescribed_sets,
                                        prescribed_reps=entry.prescribed_reps,
                                        prescribed_weight=entry.prescribed_weight, notes=entry.notes, )

    @classmethod
    def _to_response(cls, template: WorkoutTemplate) -> WorkoutTemplateResponse:
        return WorkoutTemplateResponse(id=template.id, title=template.title, category=template.category,
                                       exercises=[cls.to_exercise_response(e) for e in template.exercises],
                                       created_at=template.created_at, updated_at=template.updated_at, )
