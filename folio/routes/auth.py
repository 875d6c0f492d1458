from fastapi import APIRouter, Depends

from ..core.exceptions import FolioError, InternalError
from ..core.logger import logger
from ..dependencies.auth_dependencies import get_auth_service
from ..dto.auth import LoginRequest, SignupRequest
from ..services.auth_service import AuthService
from ..utils import success_response

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup")
def signup(
    payload: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        data = auth_service.register_user(
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise InternalError()

    return success_response(data, "User registered successfully")


@router.post("/login")
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    try:
        data = auth_service.login_user(email=payload.email, password=payload.password)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise InternalError()

    return success_response(data, "Login successful")
