from .logger import logger
from .exceptions import (
    FolioError,
    ValidationError,
    Unauthorized,
    InvalidToken,
    InvalidCredentials,
    Conflict,
    NotFound,
    InternalError,
)

__all__ = [
    "logger",
    "FolioError",
    "ValidationError",
    "Unauthorized",
    "InvalidToken",
    "InvalidCredentials",
    "Conflict",
    "NotFound",
    "InternalError",
]
