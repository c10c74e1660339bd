"""
Workout assignment repository.

Week queries use **exact-bounds containment**: an assignment is returned
only when ``week_start >= range_start`` and ``week_end <= range_end``.
Assignments that merely overlap the range are not returned.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from grind.models.workout_assignment import WorkoutAssignment


class WorkoutAssignmentRepository:
    """Repository for WorkoutAssignment database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, assignment: WorkoutAssignment) -> WorkoutAssignment:
        self.session.add(assignment)
        self.session.commit()
        self.session.refresh(assignment)
        return assignment

    def get_by_id(self, assignment_id: int) -> Optional[WorkoutAssignment]:
        return self.session.get(WorkoutAssignment, assignment_id)

    def get_within_range(self, athlete_id: Optional[int], start: datetime.date,
                         end: datetime.date, ) -> list[WorkoutAssignment]:
        """Assignments fully contained in ``[start, end]``.

        ``athlete_id=None`` returns every athlete's assignments.
        """
        statement = select(WorkoutAssignment).where(WorkoutAssignment.week_start >= start,
                                                    WorkoutAssignment.week_end <= end, )
        if athlete_id is not None:
            statement = statement.where(WorkoutAssignment.athlete_id == athlete_id)
        statement = statement.order_by(WorkoutAssignment.created_at, WorkoutAssignment.id)
        return list(self.session.exec(statement).all())

    def count_by_template(self, template_id: int) -> int:
        statement = (select(func.count()).select_from(WorkoutAssignment).where(
            WorkoutAssignment.template_id == template_id))
        return self.session.exec(statement).first() or 0
