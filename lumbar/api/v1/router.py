"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from lumbar.api.v1.endpoints import analytics, exercises, routines, sessions, user_settings

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercise catalog"]
)
api_router.include_router(
    routines.router, prefix="/routines", tags=["Routines"]
)
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Workout sessions"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(
    user_settings.router, prefix="/settings", tags=["Settings"]
)
