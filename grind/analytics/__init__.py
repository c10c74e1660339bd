"""Load analytics: session-count ACWR, readiness colouring, progress."""

from grind.analytics.acwr import ACWRConfig, classify_ratio, compute_acwr
from grind.analytics.readiness import color_for_log, readiness_color

__all__ = ["ACWRConfig", "classify_ratio", "compute_acwr", "color_for_log", "readiness_color"]
