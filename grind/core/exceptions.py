"""
Error taxonomy for the workout programming subsystem.

Each error is an :class:`HTTPException` so that services can raise it
directly and FastAPI renders it with the matching status code.  None of
them is retried; every failure is scoped to the request that raised it.
"""

from fastapi import HTTPException, status


class GrindError(HTTPException):
    """Base class; subclasses pin the HTTP status."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.http_status, detail=detail)


class ValidationError(GrindError):
    """Missing or invalid ids, malformed dates, inconsistent week bounds."""

    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(GrindError):
    """Assignment, session, template or exercise does not exist."""

    http_status = status.HTTP_404_NOT_FOUND


class AuthorizationError(GrindError):
    """Non-admin attempting an admin-only write, or an athlete outside own scope."""

    http_status = status.HTTP_403_FORBIDDEN


class ConflictError(GrindError):
    """A write would violate a uniqueness or ownership invariant."""

    http_status = status.HTTP_409_CONFLICT
