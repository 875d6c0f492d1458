from .auth import SignupRequest, LoginRequest
from .section import SectionItem, SectionCreateRequest, SectionUpdateRequest

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "SectionItem",
    "SectionCreateRequest",
    "SectionUpdateRequest",
]
