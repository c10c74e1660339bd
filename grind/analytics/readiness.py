"""
Readiness risk colouring.

Qualitative, per-day, and independent of the ACWR.  The rules are
exact-value rules on the 1-5 scale: a 3 on either axis is ``caution``,
a 4 or 5 on either axis is ``high_risk``; high risk is checked first.
"""

from typing import Optional

from grind.models.readiness_log import ReadinessLog
from grind.schemas.readiness import RiskColor

HIGH_RISK_MIN = 4
CAUTION_VALUE = 3


def readiness_color(soreness: int, fatigue: int) -> RiskColor:
    """Colour for one readiness report."""
    if soreness >= HIGH_RISK_MIN or fatigue >= HIGH_RISK_MIN:
        return RiskColor.HIGH_RISK
    if soreness == CAUTION_VALUE or fatigue == CAUTION_VALUE:
        return RiskColor.CAUTION
    return RiskColor.NORMAL


def color_for_log(entry: Optional[ReadinessLog]) -> RiskColor:
    """Colour for a day's report, ``none`` when the athlete did not report."""
    if entry is None:
        return RiskColor.NONE
    return readiness_color(entry.soreness, entry.fatigue)
