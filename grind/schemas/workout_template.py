"""
Workout template API schemas.

Templates are exposed as an owned, ordered collection of prescribed
exercises; each entry carries the referenced catalog exercise's id and
name flat on the entry.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TemplateExerciseCreate(BaseModel):
    """A prescribed exercise submitted with (or appended to) a template."""

    exercise_id: int
    prescribed_sets: Optional[int] = None
    prescribed_reps: Optional[int] = None
    prescribed_weight: Optional[float] = None
    notes: Optional[str] = Field(None, max_length=1000)


class TemplateExerciseUpdate(BaseModel):
    """New prescription for an existing template entry (all fields replaced)."""

    id: int
    prescribed_sets: Optional[int] = None
    prescribed_reps: Optional[int] = None
    prescribed_weight: Optional[float] = None
    notes: Optional[str] = Field(None, max_length=1000)


class WorkoutTemplateCreate(BaseModel):
    """Schema for creating a template; list order becomes ``sort_order``."""

    title: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    exercises: list[TemplateExerciseCreate] = Field(default_factory=list)


class WorkoutTemplateUpdate(BaseModel):
    """Schema for editing a template header and its prescriptions."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    exercises: list[TemplateExerciseUpdate] = Field(default_factory=list)


class TemplateExerciseResponse(BaseModel):
    id: int
    exercise_id: int
    exercise_name: str
    sort_order: int
    prescribed_sets: Optional[int]
    prescribed_reps: Optional[int]
    prescribed_weight: Optional[float]
    notes: Optional[str]


class WorkoutTemplateResponse(BaseModel):
    """Template with its exercises in prescribed order."""

    id: int
    title: str
    category: str
    exercises: list[TemplateExerciseResponse]
    created_at: datetime.datetime
    updated_at: datetime.datetime
