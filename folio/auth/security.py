import secrets
from typing import Optional, Tuple

from passlib.context import CryptContext

from ..config import settings
from ..core.logger import logger

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

MIN_PASSWORD_LENGTH = 6


def generate_fake_hash() -> str:
    return pwd_context.hash(secrets.token_urlsafe(32))


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"Password verification against malformed hash: {e}")
        return False


def verify_user_password(user_repo, email: str, password: str):
    """Return the user owning ``email`` if ``password`` matches, else None.

    An unknown email still pays for one bcrypt verification so the two
    failure paths take comparable time.
    """
    user = user_repo.get_by_email(email)

    provided_hash = user.hashed_password if user else generate_fake_hash()
    is_valid = verify_password(password, provided_hash)

    return user if (user and is_valid) else None


def validate_password(password: str) -> Tuple[bool, str]:
    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return True, ""
