from typing import Optional, Dict, Any
from sqlalchemy.orm import Session
from ..models.profile import Profile
from ...core.logger import logger


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return {
        'id': str(profile.id),
        'userId': str(profile.user_id),
        'username': profile.username,
        'fullName': profile.full_name,
        'title': profile.title,
        'bio': profile.bio,
        'location': profile.location,
        'avatar': profile.avatar,
        'socialLinks': profile.social_links or {},
        'theme': profile.theme,
        'layout': profile.layout,
        'createdAt': profile.created_at,
        'updatedAt': profile.updated_at,
    }


class ProfileRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_user_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        return profile_to_dict(profile) if profile else None

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        profile = self.db.query(Profile).filter(Profile.username == username).first()
        return profile_to_dict(profile) if profile else None

    def update(self, user_id: int, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply column ``updates`` to the profile owned by ``user_id``."""
        try:
            profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
            if not profile:
                return None

            for column, value in updates.items():
                setattr(profile, column, value)

            self.db.commit()
            self.db.refresh(profile)
            return profile_to_dict(profile)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating profile for user {user_id}: {e}")
            raise
