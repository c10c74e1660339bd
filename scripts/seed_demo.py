"""
Demo data seeder.

Creates an admin, two athletes, a small exercise catalog, one template
assigned to both athletes for the current week, and a readiness report
per athlete.  Re-running is safe: users are matched by email and the
catalog is only created when empty.

Usage:
    python scripts/seed_demo.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from grind.core.config import settings
from grind.core.context import RequestContext, Role
from grind.core.logging_config import get_logger, setup_logging
from grind.db.init_db import init_db
from grind.db.repositories.user import UserRepository
from grind.db.session import engine
from grind.models.user import User
from grind.schemas.exercise import ExerciseCreate
from grind.schemas.readiness import ReadinessLogUpsert
from grind.schemas.workout_assignment import AssignmentCreate
from grind.schemas.workout_template import TemplateExerciseCreate, WorkoutTemplateCreate
from grind.services.assignment_service import AssignmentService, current_week_start
from grind.services.catalog_service import CatalogService
from grind.services.readiness_service import ReadinessService

logger = get_logger("grind.seed")

DEMO_USERS = [
    ("coach@grind.local", "Casey Coach", Role.ADMIN),
    ("avery@grind.local", "Avery Athlete", Role.ATHLETE),
    ("jordan@grind.local", "Jordan Athlete", Role.ATHLETE),
]

DEMO_EXERCISES = [
    ("Long toss", "Throwing", "Progressive distance throwing"),
    ("Trap bar deadlift", "Strength", None),
    ("Med ball scoop toss", "Power", None),
    ("Band pull-apart", "Arm care", None),
]


def _ensure_user(repo: UserRepository, email: str, full_name: str, role: Role) -> User:
    user = repo.get_by_email(email)
    if user:
        return user
    return repo.create(User(email=email, full_name=full_name, role=role.value))


def seed(session: Session) -> None:
    users = UserRepository(session)
    admin, *athletes = [_ensure_user(users, *row) for row in DEMO_USERS]
    ctx = RequestContext(user_id=admin.id, role=Role.ADMIN)

    catalog = CatalogService(session)
    if catalog.list_exercises(ctx):
        logger.info("Catalog already seeded, skipping")
        return

    exercises = [catalog.create_exercise(ctx, ExerciseCreate(name=name, category=category, description=description))
                 for name, category, description in DEMO_EXERCISES]
    template = catalog.create_template(ctx, WorkoutTemplateCreate(
        title="Pitcher in-season A", category="Throwing",
        exercises=[TemplateExerciseCreate(exercise_id=e.id, prescribed_sets=3, prescribed_reps=8) for e in exercises],
    ))

    week_start = current_week_start()
    assignments = AssignmentService(session)
    readiness = ReadinessService(session)
    for soreness, athlete in enumerate(athletes, start=2):
        assignments.create(ctx, AssignmentCreate(athlete_id=athlete.id, template_id=template.id,
                                                 week_start=week_start))
        readiness.upsert(ctx, athlete.id, datetime.date.today(),
                         ReadinessLogUpsert(soreness=soreness, fatigue=2, notes="Seeded check-in"))

    logger.info("Demo data seeded", extra={"ctx_template_id": template.id, "ctx_athletes": len(athletes),
                                           "ctx_week_start": week_start})


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    init_db()
    with Session(engine) as db:
        seed(db)
