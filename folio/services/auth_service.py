from typing import Any, Dict

from ..auth.entities.claims import TokenClaims
from ..auth.security import get_password_hash, validate_password, verify_user_password
from ..auth.services import create_access_token
from ..auth.validators import normalize_email, validate_email, validate_username
from ..core.exceptions import Conflict, InvalidCredentials, ValidationError
from ..core.logger import logger
from ..database.models import User
from ..database.repositories.user_repository import UserRepository

USERNAME_RULES = (
    "Username must be 3-30 characters and can only contain "
    "lowercase letters, numbers, hyphens, and underscores"
)


def public_user(user: User) -> Dict[str, Any]:
    return {"id": str(user.id), "username": user.username, "email": user.email}


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def register_user(self, username: str, email: str, password: str) -> Dict[str, Any]:
        """Create a user and its default profile.

        No token is issued here; the client logs in separately.
        """
        if not username or not email or not password:
            raise ValidationError("All fields are required")

        if not validate_username(username):
            raise ValidationError(USERNAME_RULES)

        normalized_email = normalize_email(email)
        if not validate_email(normalized_email):
            raise ValidationError("Invalid email format")

        is_valid_pass, pass_error = validate_password(password)
        if not is_valid_pass:
            raise ValidationError(pass_error)

        if self.user_repo.exists(normalized_email, username):
            logger.warning(f"Registration rejected, account exists: {username}")
            raise Conflict()

        user = self.user_repo.create_with_profile(
            username=username,
            email=normalized_email,
            hashed_password=get_password_hash(password),
        )
        logger.info(f"User registered successfully: {username}")
        return {"user": public_user(user)}

    def login_user(self, email: str, password: str) -> Dict[str, Any]:
        if not email or not password:
            raise ValidationError("Email and password are required")

        normalized_email = normalize_email(email)
        user = verify_user_password(self.user_repo, normalized_email, password)
        if not user:
            logger.warning(f"Failed login attempt for: {normalized_email}")
            raise InvalidCredentials()

        token = create_access_token(
            TokenClaims(user_id=str(user.id), username=user.username, email=user.email)
        )
        logger.info(f"User logged in successfully: {normalized_email}")
        return {"user": public_user(user), "token": token}
