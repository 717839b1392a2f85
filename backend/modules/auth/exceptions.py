"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handler, which answers every one of them with a bare 403.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when an ID token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when an ID token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class VerificationUnavailableError(AuthenticationError):
    """Raised when the identity provider could not be reached."""

    def __init__(self, message: str = "Token verification unavailable"):
        super().__init__(message, code="VERIFICATION_UNAVAILABLE")
