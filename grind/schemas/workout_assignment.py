"""
Workout assignment API schemas.
"""

import datetime

from pydantic import BaseModel, Field


class AssignmentCreate(BaseModel):
    """Schema for assigning a template to an athlete for one week."""

    athlete_id: int
    template_id: int
    week_start: datetime.date = Field(..., description="First day of the week; week_end is derived (+6 days)")


class AssignmentResponse(BaseModel):
    """Assignment with the template header denormalised for list views."""

    id: int
    athlete_id: int
    template_id: int
    template_title: str
    template_category: str
    week_start: datetime.date
    week_end: datetime.date
    created_at: datetime.datetime
