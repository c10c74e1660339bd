"""
Tests for exercise logging and weekly progress.
"""

import datetime

import pytest

from grind.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from grind.db.repositories.exercise_log import ExerciseLogRepository
from grind.schemas.exercise_log import ExerciseLogUpsert
from grind.schemas.progress import ProgressSummary
from grind.schemas.workout_assignment import AssignmentCreate
from grind.services.assignment_service import AssignmentService
from grind.services.exercise_log_service import ExerciseLogService
from grind.services.session_service import SessionService

SUNDAY = datetime.date(2026, 3, 1)


def _assign(db, admin_ctx, athlete_id, template_id, week_start=SUNDAY):
    return AssignmentService(db).create(admin_ctx, AssignmentCreate(athlete_id=athlete_id, template_id=template_id,
                                                                    week_start=week_start))


@pytest.fixture
def opened(db, admin_ctx, athlete_ctx, athlete, template):
    assignment = _assign(db, admin_ctx, athlete.id, template.id)
    return SessionService(db).ensure_session(athlete_ctx, assignment.id)


# ======================================================================
# upsert
# ======================================================================


class TestUpsertLog:
    def test_creates_then_overwrites(self, db, athlete_ctx, opened, exercises):
        service = ExerciseLogService(db)
        first = service.upsert(athlete_ctx, opened.id,
                               ExerciseLogUpsert(exercise_id=exercises[0].id, sets=3, reps=10, weight=20))
        second = service.upsert(athlete_ctx, opened.id,
                                ExerciseLogUpsert(exercise_id=exercises[0].id, completed=True, sets=4, reps=8))

        assert second.id == first.id
        assert second.completed is True
        assert second.sets == 4
        assert second.reps == 8
        assert second.weight is None
        assert second.logged_at >= first.logged_at
        assert len(service.list_logs(athlete_ctx, opened.id)) == 1

    @pytest.mark.parametrize("sets, reps, weight", [(0, 0, 0.0), (-1, -5, -20.5)])
    def test_values_stored_as_submitted(self, db, athlete_ctx, opened, exercises, sets, reps, weight):
        log = ExerciseLogService(db).upsert(athlete_ctx, opened.id, ExerciseLogUpsert(
            exercise_id=exercises[0].id, sets=sets, reps=reps, weight=weight))
        assert (log.sets, log.reps, log.weight) == (sets, reps, weight)

    def test_unknown_exercise(self, db, athlete_ctx, opened):
        with pytest.raises(ValidationError):
            ExerciseLogService(db).upsert(athlete_ctx, opened.id, ExerciseLogUpsert(exercise_id=999))

    def test_missing_session(self, db, athlete_ctx, exercises):
        with pytest.raises(NotFoundError):
            ExerciseLogService(db).upsert(athlete_ctx, 999, ExerciseLogUpsert(exercise_id=exercises[0].id))

    def test_other_athlete_forbidden(self, db, other_ctx, opened, exercises):
        with pytest.raises(AuthorizationError):
            ExerciseLogService(db).upsert(other_ctx, opened.id, ExerciseLogUpsert(exercise_id=exercises[0].id))


# ======================================================================
# progress_summary
# ======================================================================


class TestProgressSummary:
    def test_week_totals(self, db, admin_ctx, athlete_ctx, athlete, template, exercises):
        """3 assignments, 2 completed sessions, 12 logs of which 9 completed."""
        sessions = SessionService(db)
        logs = ExerciseLogService(db)
        assignments = [_assign(db, admin_ctx, athlete.id, template.id) for _ in range(3)]

        completed_flags = iter([True] * 9 + [False] * 3)
        for index, assignment in enumerate(assignments):
            opened = sessions.ensure_session(athlete_ctx, assignment.id)
            for exercise in exercises:
                logs.upsert(athlete_ctx, opened.id,
                            ExerciseLogUpsert(exercise_id=exercise.id, completed=next(completed_flags)))
            if index < 2:
                sessions.complete_session(athlete_ctx, opened.id)

        summary = logs.progress_summary(athlete_ctx, athlete.id, SUNDAY)
        assert summary == ProgressSummary(workouts_completed=2, workouts_total=3, exercises_completed=9,
                                          exercises_total=12)

    def test_empty_week(self, db, athlete_ctx, athlete):
        assert ExerciseLogService(db).progress_summary(athlete_ctx, athlete.id, SUNDAY) == ProgressSummary()

    def test_unopened_assignment_counts(self, db, admin_ctx, athlete_ctx, athlete, template):
        _assign(db, admin_ctx, athlete.id, template.id)
        summary = ExerciseLogService(db).progress_summary(athlete_ctx, athlete.id, SUNDAY)
        assert summary.workouts_total == 1
        assert summary.workouts_completed == 0

    def test_overlapping_assignment_ignored(self, db, admin_ctx, athlete_ctx, athlete, template):
        _assign(db, admin_ctx, athlete.id, template.id, SUNDAY + datetime.timedelta(days=1))
        summary = ExerciseLogService(db).progress_summary(athlete_ctx, athlete.id, SUNDAY)
        assert summary.workouts_total == 0

    def test_other_athlete_forbidden(self, db, other_ctx, athlete):
        with pytest.raises(AuthorizationError):
            ExerciseLogService(db).progress_summary(other_ctx, athlete.id, SUNDAY)


# ======================================================================
# progress_trends
# ======================================================================


class TestProgressTrends:
    def test_exercises_with_history(self, db, athlete_ctx, athlete, opened, exercises, admin_ctx, template):
        repo = ExerciseLogRepository(db)
        second = SessionService(db).ensure_session(athlete_ctx, _assign(db, admin_ctx, athlete.id, template.id).id)
        base = datetime.datetime(2026, 3, 2, 17, 0, 0)

        # Deadlift logged in both sessions, scoop toss once, long toss without weight
        repo.upsert(opened.id, exercises[1].id, True, 3, 5, 120.0, base)
        repo.upsert(second.id, exercises[1].id, True, 3, 5, 125.0, base + datetime.timedelta(days=2))
        repo.upsert(second.id, exercises[2].id, True, 3, 8, 6.0, base + datetime.timedelta(days=2))
        repo.upsert(second.id, exercises[0].id, True, None, None, None, base + datetime.timedelta(days=2))

        trends = ExerciseLogService(db).progress_trends(athlete_ctx, athlete.id)
        assert len(trends) == 1
        assert trends[0].exercise_name == "Trap bar deadlift"
        assert trends[0].weight == 125.0
        assert trends[0].logged_at == base + datetime.timedelta(days=2)
