"""
Shared API dependencies.

The gateway in front of the API authenticates the caller and forwards
the user id in ``X-User-Id``.  The role is always read from the local
profile mirror, never trusted from the request.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlmodel import Session

from grind.core.context import RequestContext, Role
from grind.db.repositories.user import UserRepository
from grind.db.session import get_db


def get_request_context(x_user_id: Optional[int] = Header(None), db: Session = Depends(get_db), ) -> RequestContext:
    """Resolve the caller into an explicit :class:`RequestContext`."""
    if x_user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header")
    user = UserRepository(db).get_by_id(x_user_id)
    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown or inactive user")
    return RequestContext(user_id=user.id, role=Role(user.role))
