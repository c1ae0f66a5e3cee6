"""
Domain errors - one hierarchy, mapped to HTTP by the global handlers in app.api.error_handlers.
Challenge: Services stay framework-agnostic; status codes live next to the error type.
"""

from fastapi import status


class AppError(Exception):
    """Base for every error the API reports on purpose. Message is safe to show."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(AppError):
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateError(AppError):
    """Unique constraint would be (or was) violated."""

    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class InvalidCredentialsError(AppError):
    # Same message for unknown email and wrong password
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class AuthenticationError(AppError):
    http_status = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class MissingTokenError(AuthenticationError):
    default_message = "Access token missing"


class InvalidTokenError(AuthenticationError):
    # Malformed, tampered and expired tokens are indistinguishable to the caller
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class UserNotFoundError(AuthenticationError):
    default_message = "User not found"


class AuthorizationError(AppError):
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
