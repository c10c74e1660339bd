"""
Workout template repository.

Templates are always loaded together with their ordered exercises; the
``exercises`` relationship is ordered by ``sort_order`` at the mapper
level.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from grind.models.workout_template import TemplateExercise, WorkoutTemplate


class WorkoutTemplateRepository:
    """Repository for WorkoutTemplate and its owned TemplateExercise rows."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, template: WorkoutTemplate) -> WorkoutTemplate:
        self.session.add(template)
        self.session.commit()
        self.session.refresh(template)
        return template

    def get_by_id(self, template_id: int) -> Optional[WorkoutTemplate]:
        return self.session.get(WorkoutTemplate, template_id)

    def get_all(self) -> list[WorkoutTemplate]:
        statement = select(WorkoutTemplate).order_by(WorkoutTemplate.title, WorkoutTemplate.id)
        return list(self.session.exec(statement).all())

    def next_sort_order(self, template_id: int) -> int:
        """Position for an exercise appended to the end of the template."""
        statement = select(func.max(TemplateExercise.sort_order)).where(TemplateExercise.template_id == template_id)
        current = self.session.exec(statement).first()
        return 0 if current is None else current + 1

    def add_exercise(self, item: TemplateExercise) -> TemplateExercise:
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def update(self, template: WorkoutTemplate) -> WorkoutTemplate:
        self.session.add(template)
        self.session.commit()
        self.session.refresh(template)
        return template

    def delete(self, template_id: int) -> bool:
        """Delete a template; its template-exercises go with it (cascade)."""
        template = self.get_by_id(template_id)
        if template:
            self.session.delete(template)
            self.session.commit()
            return True
        return False
