"""
ACWR (Acute:Chronic Workload Ratio) schemas.

Load is the number of workout sessions started, not a tonnage:

- ``acute``  : sessions started in the last 7 days
- ``chronic``: sessions started in the last 28 days, divided by 4
- ``ratio``  : acute / chronic rounded to 2 decimals (0 when chronic is 0)

Flags:

- ``underload``    : ratio < 0.80
- ``sweet_spot``   : 0.80 <= ratio <= 1.30
- ``overload_risk``: ratio > 1.30

With no chronic baseline the ratio is 0 and the flag is ``sweet_spot``.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ACWRFlag(str, Enum):
    UNDERLOAD = "underload"
    SWEET_SPOT = "sweet_spot"
    OVERLOAD_RISK = "overload_risk"


class ACWRResult(BaseModel):
    """Outcome of one ACWR computation."""

    acute: int = Field(..., description="Sessions started in the acute window")
    chronic: float = Field(..., description="Sessions in the chronic window divided by 4")
    ratio: float = Field(..., description="acute / chronic, 2 decimals; 0 if chronic is 0")
    flag: ACWRFlag


class AthleteACWRResponse(BaseModel):
    """ACWR for one athlete at a reference instant."""

    athlete_id: int
    athlete_name: Optional[str] = None
    reference: datetime.datetime
    acwr: ACWRResult
