"""
User database model.

Local mirror of the identity provider's profiles.  Only the role and the
display name matter to the workout subsystem; credentials live with the
identity provider.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from grind.core.context import Role


class User(SQLModel, table=True):
    """A facility account: member, athlete or admin."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default=Role.MEMBER.value, max_length=20, nullable=False, index=True)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
