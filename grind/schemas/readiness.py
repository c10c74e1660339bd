"""
Readiness check-in schemas.

Athletes rate soreness and fatigue on a 1-5 scale once per day.  The
calendar colour for a day is derived from that day's report only:

- ``none``     : no report for that day
- ``high_risk``: soreness >= 4 or fatigue >= 4
- ``caution``  : soreness == 3 or fatigue == 3
- ``normal``   : anything else
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RiskColor(str, Enum):
    NONE = "none"
    NORMAL = "normal"
    CAUTION = "caution"
    HIGH_RISK = "high_risk"


class ReadinessLogUpsert(BaseModel):
    """Schema for a daily readiness report."""

    soreness: int = Field(..., ge=1, le=5, description="1 (none) to 5 (severe)")
    fatigue: int = Field(..., ge=1, le=5, description="1 (fresh) to 5 (exhausted)")
    notes: Optional[str] = Field(None, max_length=1000)


class ReadinessLogResponse(BaseModel):
    id: int
    athlete_id: int
    log_date: datetime.date
    soreness: int
    fatigue: int
    notes: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class DayColorResponse(BaseModel):
    """Risk colour for one athlete on one day."""

    athlete_id: int
    date: datetime.date
    color: RiskColor


class ReadinessNoteResponse(BaseModel):
    """Entry of the admin readiness notes feed."""

    id: int
    athlete_id: int
    athlete_name: Optional[str]
    log_date: datetime.date
    soreness: int
    fatigue: int
    notes: Optional[str]
