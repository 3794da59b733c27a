"""
Base exception classes for the storefront customer API.

Each module should define its own exceptions that inherit from these bases.
API error handlers map the bases onto HTTP status codes, so a module only
has to pick the right parent.
"""

from typing import Optional, Any


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(StorefrontError):
    """Resource not found."""

    pass


class ValidationError(StorefrontError):
    """Input validation failed."""

    pass


class AuthenticationError(StorefrontError):
    """Authentication failed (no usable session or token). Maps to 401."""

    pass


class AuthorizationError(StorefrontError):
    """The caller was identified but is not allowed in. Maps to 403."""

    pass


class ExternalServiceError(StorefrontError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
