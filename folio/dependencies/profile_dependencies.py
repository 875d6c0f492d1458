from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..database.repositories.profile_repository import ProfileRepository
from ..services.profile_service import ProfileService


def get_profile_repository(db: Session = Depends(get_db)) -> ProfileRepository:
    return ProfileRepository(db)


def get_profile_service(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
) -> ProfileService:
    return ProfileService(profile_repo=profile_repo)
