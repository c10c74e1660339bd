"""Shared fixtures: in-memory SQLite database, demo users and a catalog."""

import os

# Must be set before grind.db.session creates its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import grind.db.base  # noqa: F401
from grind.core.context import RequestContext, Role
from grind.db.repositories.user import UserRepository
from grind.models.user import User
from grind.schemas.exercise import ExerciseCreate
from grind.schemas.workout_template import TemplateExerciseCreate, WorkoutTemplateCreate
from grind.services.catalog_service import CatalogService


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


# ======================================================================
# Users and contexts
# ======================================================================


def _add_user(db: Session, email: str, full_name: str, role: Role, is_active: bool = True) -> User:
    return UserRepository(db).create(User(email=email, full_name=full_name, role=role.value, is_active=is_active))


@pytest.fixture
def admin(db) -> User:
    return _add_user(db, "coach@example.com", "Casey Coach", Role.ADMIN)


@pytest.fixture
def athlete(db) -> User:
    return _add_user(db, "avery@example.com", "Avery Athlete", Role.ATHLETE)


@pytest.fixture
def other_athlete(db) -> User:
    return _add_user(db, "jordan@example.com", "Jordan Athlete", Role.ATHLETE)


@pytest.fixture
def member(db) -> User:
    return _add_user(db, "morgan@example.com", "Morgan Member", Role.MEMBER)


@pytest.fixture
def admin_ctx(admin) -> RequestContext:
    return RequestContext(user_id=admin.id, role=Role.ADMIN)


@pytest.fixture
def athlete_ctx(athlete) -> RequestContext:
    return RequestContext(user_id=athlete.id, role=Role.ATHLETE)


@pytest.fixture
def other_ctx(other_athlete) -> RequestContext:
    return RequestContext(user_id=other_athlete.id, role=Role.ATHLETE)


@pytest.fixture
def member_ctx(member) -> RequestContext:
    return RequestContext(user_id=member.id, role=Role.MEMBER)


# ======================================================================
# Catalog
# ======================================================================


@pytest.fixture
def exercises(db, admin_ctx):
    """Four catalog exercises, in creation order."""
    service = CatalogService(db)
    return [
        service.create_exercise(admin_ctx, ExerciseCreate(name=name, category=category))
        for name, category in [
            ("Long toss", "Throwing"),
            ("Trap bar deadlift", "Strength"),
            ("Med ball scoop toss", "Power"),
            ("Band pull-apart", "Arm care"),
        ]
    ]


@pytest.fixture
def template(db, admin_ctx, exercises):
    """A template prescribing every fixture exercise, in order."""
    return CatalogService(db).create_template(admin_ctx, WorkoutTemplateCreate(
        title="Pitcher in-season A", category="Throwing",
        exercises=[TemplateExerciseCreate(exercise_id=e.id, prescribed_sets=3, prescribed_reps=8)
                   for e in exercises],
    ))
