"""
Analytics endpoints: adherence statistics.
"""

from fastapi import APIRouter, Depends

from lumbar.api.dependencies import get_session_service
from lumbar.schemas.statistics import Statistics
from lumbar.services.session_service import SessionService

router = APIRouter()


@router.get(
    "/statistics",
    summary="Get adherence statistics (streaks, completion rate).",
    response_model=Statistics,
)
def get_statistics(service: SessionService = Depends(get_session_service)):
    return service.statistics()
