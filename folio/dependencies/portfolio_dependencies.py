from fastapi import Depends

from ..database.repositories.profile_repository import ProfileRepository
from ..database.repositories.section_repository import SectionRepository
from ..services.portfolio_service import PortfolioService
from .profile_dependencies import get_profile_repository
from .section_dependencies import get_section_repository


def get_portfolio_service(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
    section_repo: SectionRepository = Depends(get_section_repository),
) -> PortfolioService:
    return PortfolioService(profile_repo=profile_repo, section_repo=section_repo)
