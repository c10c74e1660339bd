"""
Exercise catalog model.

Exercise definitions are admin-authored and referenced (never owned) by
workout templates and exercise logs.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class ExerciseDefinition(SQLModel, table=True):
    """A catalog exercise, e.g. "Long toss" in category "Throwing"."""

    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=200, index=True)
    category: str = Field(nullable=False, max_length=100)
    description: Optional[str] = Field(default=None, max_length=2000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
