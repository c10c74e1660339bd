"""
Admin week calendar: athletes x 7 days.

Each cell holds the readiness colour of that day and the assignments
whose ``week_start`` falls on that day.  Assignments are selected with
the same exact-bounds week filter as the athlete views, so in practice
only assignments starting on the calendar's first day appear.
"""

import datetime

from sqlmodel import Session

from grind.analytics.readiness import color_for_log
from grind.db.repositories.readiness_log import ReadinessLogRepository
from grind.db.repositories.user import UserRepository
from grind.db.repositories.workout_assignment import WorkoutAssignmentRepository
from grind.models.readiness_log import ReadinessLog
from grind.models.workout_assignment import WEEK_LENGTH_DAYS, week_end_for
from grind.schemas.calendar import CalendarAssignment, CalendarDay, CalendarRow, WeekCalendarResponse


def build_week_calendar(session: Session, week_start: datetime.date) -> WeekCalendarResponse:
    """Assemble the roster calendar for the week starting on ``week_start``."""
    week_end = week_end_for(week_start)

    athletes = UserRepository(session).get_active_athletes()
    assignments = WorkoutAssignmentRepository(session).get_within_range(None, week_start, week_end)
    readiness = ReadinessLogRepository(session).get_by_date_range(week_start, week_end)

    # Rows come oldest write first, so the latest report per day wins
    reports: dict[tuple[int, datetime.date], ReadinessLog] = {}
    for entry in readiness:
        reports[(entry.athlete_id, entry.log_date)] = entry

    rows: list[CalendarRow] = []
    for athlete in athletes:
        days: list[CalendarDay] = []
        for offset in range(WEEK_LENGTH_DAYS):
            day = week_start + datetime.timedelta(days=offset)
            cell = [
                CalendarAssignment(id=a.id, template_title=a.template.title if a.template else "")
                for a in assignments
                if a.athlete_id == athlete.id and a.week_start == day
            ]
            days.append(CalendarDay(date=day, color=color_for_log(reports.get((athlete.id, day))),
                                    assignments=cell))
        rows.append(CalendarRow(athlete_id=athlete.id, athlete_name=athlete.full_name, days=days))

    return WeekCalendarResponse(week_start=week_start, week_end=week_end, athletes=rows)
