from .user_repository import UserRepository
from .profile_repository import ProfileRepository
from .section_repository import SectionRepository

__all__ = ["UserRepository", "ProfileRepository", "SectionRepository"]
