from .dependencies import extract_bearer_token, get_current_claims
from .entities.claims import TokenClaims
from .security import (
    generate_fake_hash, get_password_hash, verify_password,
    verify_user_password, validate_password
)
from .validators import (
    validate_username, validate_email, normalize_email,
    sanitize_url, sanitize_social_links
)
from .services import create_access_token, verify_token

__all__ = [
    "extract_bearer_token", "get_current_claims", "TokenClaims",
    "generate_fake_hash", "get_password_hash", "verify_password",
    "verify_user_password", "validate_password",
    "validate_username", "validate_email", "normalize_email",
    "sanitize_url", "sanitize_social_links",
    "create_access_token", "verify_token",
]
