"""Exercise catalog repository."""

from typing import Iterable, Optional

from sqlmodel import Session, select

from grind.models.exercise import ExerciseDefinition


class ExerciseRepository:
    """Repository for ExerciseDefinition database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def get_by_id(self, exercise_id: int) -> Optional[ExerciseDefinition]:
        return self.session.get(ExerciseDefinition, exercise_id)

    def get_all(self) -> list[ExerciseDefinition]:
        statement = select(ExerciseDefinition).order_by(ExerciseDefinition.name, ExerciseDefinition.id)
        return list(self.session.exec(statement).all())

    def get_many(self, exercise_ids: Iterable[int]) -> dict[int, ExerciseDefinition]:
        """Look up several exercises at once, keyed by id.  Unknown ids are absent."""
        ids = set(exercise_ids)
        if not ids:
            return {}
        statement = select(ExerciseDefinition).where(ExerciseDefinition.id.in_(ids))
        return {e.id: e for e in self.session.exec(statement).all()}
