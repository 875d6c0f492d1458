from .auth_service import AuthService
from .profile_service import ProfileService
from .section_service import SectionService
from .portfolio_service import PortfolioService

__all__ = [
    "AuthService",
    "ProfileService",
    "SectionService",
    "PortfolioService",
]
