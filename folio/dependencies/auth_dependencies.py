from fastapi import Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_claims
from ..auth.entities.claims import TokenClaims
from ..core.exceptions import InvalidToken
from ..database import get_db
from ..database.repositories.user_repository import UserRepository
from ..services.auth_service import AuthService


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(user_repo=user_repo)


def get_current_user_id(claims: TokenClaims = Depends(get_current_claims)) -> int:
    try:
        return int(claims.user_id)
    except (TypeError, ValueError):
        raise InvalidToken()
