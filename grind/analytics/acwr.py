"""
ACWR (Acute:Chronic Workload Ratio): session-count computation.

Load is measured as the number of workout sessions an athlete started.
The computation is deliberately simple and must stay that way:

    acute   = sessions started in [reference - 7d, reference]
    chronic = sessions started in [reference - 28d, reference] / 4
    ratio   = round(acute / chronic, 2)   if chronic > 0 else 0

Known limitations
-----------------

1. ``chronic`` is a flat division of the 28-day count by 4.  It is not an
   average over four separate week buckets and not an EWMA.
2. When ``chronic`` is 0 the ratio is forced to 0 whatever ``acute`` is,
   so an athlete with no 28-day history who suddenly trains hard reads as
   ``sweet_spot``.  Kept as-is; dashboards document the caveat.

Flag boundaries are inclusive toward ``sweet_spot``: 1.30 and 0.80 are
both in the sweet spot.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, Field
from sqlmodel import Session

from grind.db.repositories.user import UserRepository
from grind.db.repositories.workout_session import WorkoutSessionRepository
from grind.schemas.acwr import ACWRFlag, ACWRResult, AthleteACWRResponse

# ======================================================================
# Configuration
# ======================================================================


class ACWRConfig(BaseModel):
    """Windows and thresholds for the ACWR computation."""

    acute_days: int = Field(7, ge=1, le=14)
    chronic_days: int = Field(28, ge=7, le=56)

    overload_above: float = 1.30
    underload_below: float = 0.80

    @property
    def chronic_weeks(self) -> float:
        return self.chronic_days / 7.0


DEFAULT_CONFIG = ACWRConfig()


# ======================================================================
# Pure computation
# ======================================================================


def classify_ratio(ratio: float, config: Optional[ACWRConfig] = None) -> ACWRFlag:
    """Map a (rounded) ratio to its flag."""
    cfg = config or DEFAULT_CONFIG
    if ratio > cfg.overload_above:
        return ACWRFlag.OVERLOAD_RISK
    if ratio < cfg.underload_below:
        return ACWRFlag.UNDERLOAD
    return ACWRFlag.SWEET_SPOT


def _reference_utc(reference: Optional[datetime.datetime]) -> datetime.datetime:
    """Reference instant as naive UTC, the form session timestamps are stored in."""
    if reference is None:
        return datetime.datetime.utcnow()
    if reference.tzinfo is not None:
        return reference.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return reference


def compute_acwr(session_starts: Iterable[datetime.datetime], reference: Optional[datetime.datetime] = None,
                 config: Optional[ACWRConfig] = None, ) -> ACWRResult:
    """Compute acute/chronic counts, ratio and flag.

    Pure: the same timestamps and reference always give the same result.

    Args:
        session_starts: Start timestamps of the athlete's sessions (naive
            UTC).  Timestamps outside the chronic window, including any
            after ``reference``, are ignored.
        reference: Instant the windows end at (defaults to now, UTC).  An
            aware value is converted to naive UTC first.
        config: Optional :class:`ACWRConfig` override.
    """
    cfg = config or DEFAULT_CONFIG
    ref = _reference_utc(reference)

    acute_start = ref - datetime.timedelta(days=cfg.acute_days)
    chronic_start = ref - datetime.timedelta(days=cfg.chronic_days)

    in_chronic = [s for s in session_starts if chronic_start <= s <= ref]
    acute = sum(1 for s in in_chronic if s >= acute_start)
    chronic = len(in_chronic) / cfg.chronic_weeks

    if chronic > 0:
        ratio = round(acute / chronic, 2)
        flag = classify_ratio(ratio, cfg)
    else:
        # No baseline: ratio pinned to 0 and reported as sweet_spot
        ratio = 0.0
        flag = ACWRFlag.SWEET_SPOT

    return ACWRResult(acute=acute, chronic=chronic, ratio=ratio, flag=flag)


# ======================================================================
# Database-backed entry points
# ======================================================================


def compute_athlete_acwr(session: Session, athlete_id: int, reference: Optional[datetime.datetime] = None,
                         config: Optional[ACWRConfig] = None, ) -> AthleteACWRResponse:
    """Load one athlete's trailing session starts and compute the ACWR."""
    cfg = config or DEFAULT_CONFIG
    ref = _reference_utc(reference)

    repo = WorkoutSessionRepository(session)
    starts = repo.get_start_times(athlete_id, ref - datetime.timedelta(days=cfg.chronic_days), ref)

    athlete = UserRepository(session).get_by_id(athlete_id)
    return AthleteACWRResponse(athlete_id=athlete_id, athlete_name=athlete.full_name if athlete else None,
                               reference=ref, acwr=compute_acwr(starts, ref, cfg), )


def compute_roster_acwr(session: Session, reference: Optional[datetime.datetime] = None,
                        config: Optional[ACWRConfig] = None, ) -> list[AthleteACWRResponse]:
    """ACWR for every active athlete, in roster order.

    Sessions of the whole roster are read with one query and grouped in
    memory.
    """
    cfg = config or DEFAULT_CONFIG
    ref = _reference_utc(reference)

    starts_by_athlete = WorkoutSessionRepository(session).get_start_times_by_athlete(
        ref - datetime.timedelta(days=cfg.chronic_days), ref)

    return [
        AthleteACWRResponse(athlete_id=athlete.id, athlete_name=athlete.full_name, reference=ref,
                            acwr=compute_acwr(starts_by_athlete.get(athlete.id, []), ref, cfg), )
        for athlete in UserRepository(session).get_active_athletes()
    ]
