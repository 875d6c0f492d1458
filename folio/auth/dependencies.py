from typing import Mapping, Optional

from fastapi import Request

from .entities.claims import TokenClaims
from .services import verify_token
from ..core.exceptions import InvalidToken, Unauthorized


def extract_bearer_token(headers: Mapping[str, str]) -> Optional[str]:
    auth_header = headers.get("authorization")
    if not auth_header:
        return None

    parts = auth_header.split(" ")
    if len(parts) != 2:
        return None

    scheme, token = parts
    if scheme != "Bearer" or not token:
        return None

    return token


def get_current_claims(request: Request) -> TokenClaims:
    token = extract_bearer_token(request.headers)
    if not token:
        raise Unauthorized()

    claims = verify_token(token)
    if not claims:
        raise InvalidToken()

    return claims
