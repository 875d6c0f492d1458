from .base import Base
from .database import get_db, get_engine, get_session_factory, create_tables
from .models import User, Profile, Section

__all__ = [
    "Base",
    "get_db",
    "get_engine",
    "get_session_factory",
    "create_tables",
    "User",
    "Profile",
    "Section",
]
