"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which turn them into responses:
- AuthorizationError subclasses (login rejections) become 403
- UnauthenticatedError becomes 401 JSON or a redirect to the login page
"""

from typing import Optional

from shared.exceptions import AuthenticationError, AuthorizationError

from .messages import trans


class InvalidCredentialsError(AuthorizationError):
    """Raised when the email/password pair does not match a customer."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or trans("invalid-credentials"), code="INVALID_CREDENTIALS")


class NotActivatedError(AuthorizationError):
    """Raised when the credentials are valid but the account is disabled."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or trans("not-activated"), code="NOT_ACTIVATED")


class NotVerifiedError(AuthorizationError):
    """
    Raised when the account is active but its email is unconfirmed.

    Carries the attempted email so the HTTP layer can set the
    resend-verification hints on the response.
    """

    def __init__(self, email: str, message: Optional[str] = None):
        super().__init__(
            message or trans("verify-first"),
            code="NOT_VERIFIED",
            details={"email": email},
        )
        self.email = email


class UnauthenticatedError(AuthenticationError):
    """
    Raised when a protected route has no acceptable identity.

    The message is empty when no identity could be resolved at all. When
    ``warning`` is set, browser clients get the message flashed on the
    login page they are redirected to.
    """

    def __init__(self, message: str = "", warning: bool = False):
        super().__init__(message, code="UNAUTHENTICATED")
        self.warning = warning
