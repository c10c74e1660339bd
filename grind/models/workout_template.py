"""
Workout template models.

A template owns an ordered list of prescribed exercises.  Each
:class:`TemplateExercise` holds a lookup key into the exercise catalog
and is deleted together with its template.
"""

import datetime
from typing import Optional

from sqlmodel import Field, Relationship, SQLModel

from grind.models.exercise import ExerciseDefinition


class WorkoutTemplate(SQLModel, table=True):
    """Admin-authored workout, reusable across many assignments."""

    __tablename__ = "workout_templates"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=200, index=True)
    category: str = Field(nullable=False, max_length=100)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    exercises: list["TemplateExercise"] = Relationship(
        back_populates="template",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "TemplateExercise.sort_order"},
    )


class TemplateExercise(SQLModel, table=True):
    """One prescribed exercise at a fixed position inside a template."""

    __tablename__ = "workout_template_exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    template_id: int = Field(foreign_key="workout_templates.id", nullable=False, index=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)

    # Explicit position within the template (0-based)
    sort_order: int = Field(default=0, nullable=False)

    # Prescription
    prescribed_sets: Optional[int] = Field(default=None)
    prescribed_reps: Optional[int] = Field(default=None)
    prescribed_weight: Optional[float] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    template: Optional[WorkoutTemplate] = Relationship(back_populates="exercises")
    exercise: Optional[ExerciseDefinition] = Relationship()
