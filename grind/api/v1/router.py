"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from grind.api.v1.endpoints import analytics, assignments, catalog, readiness, sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    catalog.router, prefix="/catalog", tags=["Catalog"]
)
api_router.include_router(
    assignments.router, prefix="/assignments", tags=["Assignments"]
)
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Workout sessions"]
)
api_router.include_router(
    readiness.router, prefix="/readiness", tags=["Readiness"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
