"""
User preference endpoints.
"""

from fastapi import APIRouter, Depends

from lumbar.api.dependencies import get_settings_service
from lumbar.schemas.user_settings import UserSettings, UserSettingsUpdate
from lumbar.services.settings_service import SettingsService

router = APIRouter()


@router.get("", summary="Get preferences (created with defaults on first access).", response_model=UserSettings, )
def get_settings(service: SettingsService = Depends(get_settings_service)):
    return service.get_all()


@router.put("", summary="Update some preferences.", response_model=UserSettings, )
def update_settings(data: UserSettingsUpdate, service: SettingsService = Depends(get_settings_service)):
    return service.update(data)


@router.post("/reset", summary="Reset preferences to defaults.", response_model=UserSettings, )
def reset_settings(service: SettingsService = Depends(get_settings_service)):
    return service.reset()
