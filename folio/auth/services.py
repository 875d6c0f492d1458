from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from ..config import settings
from ..core.logger import logger
from .entities.claims import TokenClaims


def create_access_token(claims: TokenClaims, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))

    payload = {
        **claims.to_payload(),
        "iat": now,
        "exp": expire,
        "iss": settings.TOKEN_ISSUER,
        "aud": settings.TOKEN_AUDIENCE,
    }

    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Optional[TokenClaims]:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.ALGORITHM],
            issuer=settings.TOKEN_ISSUER,
            audience=settings.TOKEN_AUDIENCE,
        )
    except JWTError as e:
        logger.warning(f"JWT decoding error: {e}")
        return None

    user_id = payload.get("userId")
    username = payload.get("username")
    email = payload.get("email")
    if not user_id or not username or not email:
        logger.warning("JWT payload is missing identity claims")
        return None

    return TokenClaims(user_id=str(user_id), username=username, email=email)
