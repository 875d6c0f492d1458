from typing import Any, Dict

from ..auth.validators import sanitize_social_links
from ..core.exceptions import NotFound, ValidationError
from ..database.models import LAYOUTS, THEMES
from ..database.repositories.profile_repository import ProfileRepository

# request key -> column
ALLOWED_FIELDS = {
    "fullName": "full_name",
    "title": "title",
    "bio": "bio",
    "location": "location",
    "avatar": "avatar",
    "socialLinks": "social_links",
    "theme": "theme",
    "layout": "layout",
}

TEXT_FIELDS = {"fullName", "title", "bio", "location", "avatar"}


def build_profile_updates(incoming: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a partial profile payload into column updates.

    Keys outside ``ALLOWED_FIELDS`` are dropped and ``None`` values skipped.
    """
    updates = {}

    for key, value in incoming.items():
        if key not in ALLOWED_FIELDS or value is None:
            continue

        if key == "socialLinks":
            value = sanitize_social_links(value)
        elif key in TEXT_FIELDS and not isinstance(value, str):
            raise ValidationError(f"{key} must be a string")
        elif key == "theme" and value not in THEMES:
            raise ValidationError("Invalid theme")
        elif key == "layout" and value not in LAYOUTS:
            raise ValidationError("Invalid layout")

        updates[ALLOWED_FIELDS[key]] = value

    return updates


class ProfileService:
    def __init__(self, profile_repo: ProfileRepository):
        self.profile_repo = profile_repo

    def get_profile(self, user_id: int) -> Dict[str, Any]:
        profile = self.profile_repo.get_by_user_id(user_id)
        if not profile:
            raise NotFound("Profile not found")
        return profile

    def update_profile(self, user_id: int, incoming: Dict[str, Any]) -> Dict[str, Any]:
        updates = build_profile_updates(incoming)

        profile = self.profile_repo.update(user_id, updates)
        if not profile:
            raise NotFound("Profile not found")
        return profile
