from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..database.repositories.section_repository import SectionRepository
from ..services.section_service import SectionService


def get_section_repository(db: Session = Depends(get_db)) -> SectionRepository:
    return SectionRepository(db)


def get_section_service(
    section_repo: SectionRepository = Depends(get_section_repository),
) -> SectionService:
    return SectionService(section_repo=section_repo)
