from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..base import Base

THEMES = ("blue", "green", "purple", "orange", "dark")
LAYOUTS = ("modern", "classic", "minimal", "creative")


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    username = Column(String(30), unique=True, index=True, nullable=False)
    full_name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False, default="")
    bio = Column(Text, nullable=False, default="")
    location = Column(String(255), nullable=False, default="")
    avatar = Column(String(2048), nullable=False, default="")
    social_links = Column(JSON, nullable=False, default=dict)
    theme = Column(String(20), nullable=False, default="blue")
    layout = Column(String(20), nullable=False, default="modern")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile")
