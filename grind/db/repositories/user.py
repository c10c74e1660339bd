"""
User repository.

Read access to the local profile mirror, mainly to resolve athletes.
"""

from typing import Optional

from sqlmodel import Session, select

from grind.core.context import Role
from grind.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_athlete(self, athlete_id: int) -> Optional[User]:
        """Return the user only if it exists and holds the athlete role."""
        user = self.get_by_id(athlete_id)
        if user is None or user.role != Role.ATHLETE.value:
            return None
        return user

    def get_active_athletes(self) -> list[User]:
        """Active athletes ordered by display name (roster order)."""
        statement = (
            select(User).where(User.role == Role.ATHLETE.value, User.is_active == True,  # noqa: E712
                               ).order_by(User.full_name, User.id))
        return list(self.session.exec(statement).all())
