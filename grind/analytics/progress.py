"""
Athlete progress aggregation.

Both helpers are pure and operate on rows already loaded by the
repositories.
"""

from typing import Iterable, Optional

from grind.models.exercise_log import ExerciseLog
from grind.models.workout_session import SessionStatus
from grind.schemas.progress import ProgressSummary, ProgressTrend

TREND_POINTS = 2


def summarize_progress(assignment_count: int, session_statuses: Iterable[str],
                       log_completed_flags: Iterable[bool], ) -> ProgressSummary:
    """Completion counts for a week.

    ``workouts_total`` counts assignments (not sessions): an assignment the
    athlete never opened is still a workout to do.
    """
    statuses = list(session_statuses)
    flags = list(log_completed_flags)
    return ProgressSummary(
        workouts_completed=sum(1 for s in statuses if s == SessionStatus.COMPLETED.value),
        workouts_total=assignment_count,
        exercises_completed=sum(1 for f in flags if f),
        exercises_total=len(flags),
    )


def select_trends(rows: Iterable[tuple[ExerciseLog, Optional[str]]], limit: int = 3, ) -> list[ProgressTrend]:
    """Pick exercises with a comparable history from recent weighted logs.

    ``rows`` must be newest first.  For each exercise the two most recent
    logs are kept; exercises reaching two logs contribute their latest
    one.  Output follows the order exercises first appear in ``rows``.
    """
    points: dict[int, list[tuple[ExerciseLog, str]]] = {}
    for log, name in rows:
        if not name:
            continue
        kept = points.setdefault(log.exercise_id, [])
        if len(kept) < TREND_POINTS:
            kept.append((log, name))

    trends: list[ProgressTrend] = []
    for kept in points.values():
        if len(kept) < TREND_POINTS:
            continue
        latest, name = kept[0]
        trends.append(ProgressTrend(exercise_id=latest.exercise_id, exercise_name=name, weight=latest.weight,
                                    reps=latest.reps, logged_at=latest.logged_at, ))
    return trends[:limit]
