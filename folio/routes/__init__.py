from .auth import router as auth_router
from .profile import router as profile_router
from .sections import router as sections_router
from .portfolio import router as portfolio_router

__all__ = ["auth_router", "profile_router", "sections_router", "portfolio_router"]
