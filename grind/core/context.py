"""
Explicit caller identity.

The identity provider resolves the caller before any operation runs;
services receive the result as a :class:`RequestContext` argument and
never read a "current user" from ambient state.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from grind.core.exceptions import AuthorizationError


class Role(str, Enum):
    MEMBER = "member"
    ATHLETE = "athlete"
    ADMIN = "admin"


class RequestContext(BaseModel):
    """Authenticated caller: user id plus role."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def require_admin(self, action: str) -> None:
        """Raise :class:`AuthorizationError` unless the caller is an admin."""
        if not self.is_admin:
            raise AuthorizationError(f"Only admins may {action}")

    def require_athlete_scope(self, athlete_id: int) -> None:
        """Allow admins, or an athlete acting on their own records."""
        if self.is_admin:
            return
        if self.role != Role.ATHLETE:
            raise AuthorizationError("Athlete portal requires the athlete role")
        if self.user_id != athlete_id:
            raise AuthorizationError("Athletes may only access their own records")
