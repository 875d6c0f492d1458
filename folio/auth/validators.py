import re
from typing import Any, Dict

USERNAME_RE = re.compile(r"^[a-z0-9_-]{3,30}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")

ALLOWED_URL_SCHEMES = {"http", "https", "mailto"}
SOCIAL_LINK_KEYS = ("github", "linkedin", "twitter", "instagram", "website", "email")


def validate_username(username: Any) -> bool:
    """Lowercase letters, digits, hyphen and underscore, 3 to 30 characters."""
    return isinstance(username, str) and USERNAME_RE.fullmatch(username) is not None


def validate_email(email: Any) -> bool:
    return isinstance(email, str) and EMAIL_RE.fullmatch(email) is not None


def normalize_email(email: str) -> str:
    return email.strip().lower()


def sanitize_url(url: Any) -> str:
    """Trim ``url`` and blank it out unless it is http(s), mailto or has no scheme."""
    if not url or not isinstance(url, str):
        return ""

    trimmed_url = url.strip()

    match = SCHEME_RE.match(trimmed_url)
    if match and match.group(1).lower() not in ALLOWED_URL_SCHEMES:
        return ""

    return trimmed_url


def sanitize_social_links(links: Any) -> Dict[str, str]:
    if not isinstance(links, dict):
        return {}

    return {
        key: sanitize_url(links[key])
        for key in SOCIAL_LINK_KEYS
        if isinstance(links.get(key), str) and links[key]
    }
