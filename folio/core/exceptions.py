from typing import Optional


class FolioError(Exception):
    """Base error; carries the HTTP status and the message shown to the client."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FolioError):
    """Malformed or missing input"""

    status_code = 400


class Unauthorized(FolioError):
    """No usable bearer token on the request"""

    status_code = 401
    default_message = "Unauthorized"


class InvalidToken(FolioError):
    """Bearer token failed signature or expiry checks"""

    status_code = 401
    default_message = "Invalid token"


class InvalidCredentials(FolioError):
    """Login failed. Same message whether the email or the password was wrong."""

    status_code = 401
    default_message = "Invalid credentials"


class Conflict(FolioError):
    """Username or email already taken. Does not say which one."""

    status_code = 400
    default_message = "User with this email or username already exists"


class NotFound(FolioError):
    """Resource absent or owned by someone else"""

    status_code = 404
    default_message = "Not found"


class InternalError(FolioError):
    status_code = 500
    default_message = "Internal server error"
