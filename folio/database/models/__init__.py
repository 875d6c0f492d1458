from .user import User
from .profile import Profile, THEMES, LAYOUTS
from .section import Section, SECTION_TYPES, MAX_INTEGER

__all__ = ["User", "Profile", "Section", "THEMES", "LAYOUTS", "SECTION_TYPES", "MAX_INTEGER"]
