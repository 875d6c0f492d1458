from .auth_dependencies import (
    get_auth_service,
    get_current_user_id,
    get_user_repository,
)
from .profile_dependencies import get_profile_service, get_profile_repository
from .section_dependencies import get_section_service, get_section_repository
from .portfolio_dependencies import get_portfolio_service

__all__ = [
    "get_auth_service",
    "get_current_user_id",
    "get_user_repository",
    "get_profile_service",
    "get_profile_repository",
    "get_section_service",
    "get_section_repository",
    "get_portfolio_service",
]
