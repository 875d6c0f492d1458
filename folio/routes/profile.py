from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ..core.exceptions import FolioError, InternalError
from ..core.logger import logger
from ..dependencies.auth_dependencies import get_current_user_id
from ..dependencies.profile_dependencies import get_profile_service
from ..services.profile_service import ProfileService
from ..utils import success_response

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/get")
def get_profile(
    user_id: int = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service),
):
    try:
        profile = profile_service.get_profile(user_id)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Profile fetch error: {e}")
        raise InternalError()

    return success_response(profile, "Profile fetched successfully")


@router.post("/update")
def update_profile(
    payload: Dict[str, Any] = Body(...),
    user_id: int = Depends(get_current_user_id),
    profile_service: ProfileService = Depends(get_profile_service),
):
    try:
        profile = profile_service.update_profile(user_id, payload)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Profile update error: {e}")
        raise InternalError()

    return success_response(profile, "Profile updated successfully")
