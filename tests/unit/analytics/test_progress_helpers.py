"""Tests for the pure progress helpers."""

import datetime

from grind.analytics.progress import select_trends, summarize_progress
from grind.models.exercise_log import ExerciseLog
from grind.schemas.progress import ProgressSummary

T0 = datetime.datetime(2026, 3, 10, 18, 0, 0)


def _log(exercise_id: int, weight: float, minutes_ago: int, reps: int = 5) -> ExerciseLog:
    return ExerciseLog(workout_session_id=1, exercise_id=exercise_id, completed=True, sets=3, reps=reps,
                       weight=weight, logged_at=T0 - datetime.timedelta(minutes=minutes_ago))


# ======================================================================
# summarize_progress
# ======================================================================


class TestSummarizeProgress:
    def test_counts(self):
        summary = summarize_progress(
            assignment_count=3,
            session_statuses=["completed", "in_progress", "completed"],
            log_completed_flags=[True] * 9 + [False] * 3,
        )
        assert summary == ProgressSummary(workouts_completed=2, workouts_total=3, exercises_completed=9,
                                          exercises_total=12)

    def test_unopened_assignments_still_count(self):
        summary = summarize_progress(assignment_count=4, session_statuses=[], log_completed_flags=[])
        assert summary.workouts_total == 4
        assert summary.workouts_completed == 0
        assert summary.exercises_total == 0

    def test_accepts_generators(self):
        summary = summarize_progress(2, (s for s in ["completed"]), (f for f in [True, False]))
        assert summary.workouts_completed == 1
        assert summary.exercises_completed == 1
        assert summary.exercises_total == 2


# ======================================================================
# select_trends
# ======================================================================


class TestSelectTrends:
    def test_needs_two_points_per_exercise(self):
        rows = [
            (_log(1, 100, 0), "Trap bar deadlift"),
            (_log(2, 20, 1), "Med ball scoop toss"),
            (_log(1, 95, 60), "Trap bar deadlift"),
        ]
        trends = select_trends(rows)
        assert len(trends) == 1
        assert trends[0].exercise_id == 1
        assert trends[0].exercise_name == "Trap bar deadlift"
        assert trends[0].weight == 100
        assert trends[0].logged_at == T0

    def test_first_seen_order_and_limit(self):
        rows = []
        for minutes, exercise_id in enumerate([3, 1, 2, 4, 3, 1, 2, 4]):
            rows.append((_log(exercise_id, 10 * exercise_id, minutes), f"Exercise {exercise_id}"))
        trends = select_trends(rows, limit=3)
        assert [t.exercise_id for t in trends] == [3, 1, 2]

    def test_older_logs_beyond_two_ignored(self):
        rows = [
            (_log(1, 100, 0, reps=3), "Squat"),
            (_log(1, 90, 10), "Squat"),
            (_log(1, 80, 20), "Squat"),
        ]
        trends = select_trends(rows)
        assert len(trends) == 1
        assert trends[0].weight == 100
        assert trends[0].reps == 3

    def test_rows_without_name_skipped(self):
        rows = [(_log(1, 100, 0), None), (_log(1, 90, 10), None)]
        assert select_trends(rows) == []
