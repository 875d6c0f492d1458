from typing import Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from ..models.user import User
from ..models.profile import Profile
from ...core.exceptions import Conflict
from ...core.logger import logger


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def exists(self, email: str, username: str) -> bool:
        return self.db.query(User.id).filter(
            or_(User.email == email, User.username == username)
        ).first() is not None

    def create_with_profile(self, username: str, email: str, hashed_password: str) -> User:
        """Insert the user and its default profile in a single transaction."""
        try:
            user = User(
                username=username,
                email=email,
                hashed_password=hashed_password,
            )
            self.db.add(user)
            self.db.flush()

            profile = Profile(
                user_id=user.id,
                username=username,
                full_name=username,
                title="",
                bio="",
                social_links={},
            )
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"User created successfully: {username}")
            return user
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Username or email already taken: {username}")
            raise Conflict()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating user {username}: {e}")
            raise
