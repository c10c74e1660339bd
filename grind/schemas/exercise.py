"""
Exercise catalog API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to the catalog."""

    name: str = Field(..., min_length=1, max_length=200, description="Exercise name, e.g. 'Long toss'")
    category: str = Field(..., min_length=1, max_length=100,
                          description="Hitting, Throwing, Arm Care, Strength, ...")
    description: Optional[str] = Field(None, max_length=2000)


class ExerciseResponse(BaseModel):
    """Schema for catalog exercises in API responses."""

    id: int
    name: str
    category: str
    description: Optional[str]
    created_at: datetime.datetime

    class Config:
        from_attributes = True
