"""
Authentication module.

Handles customer login, bearer tokens, and identity resolution for
protected routes.

Public API:
- IAuthService / ITokenService / IGuard: Interfaces for auth operations
- AuthContext, SessionGuard, TokenGuard: Per-request identity resolution
- AuthenticatedIdentity: The acting customer for one request
- Auth exceptions: InvalidCredentialsError, NotActivatedError, etc.
"""

from .interfaces import IAuthService, ITokenService, IGuard, IAccessTokenRepository
from .guards import AuthContext, SessionGuard, TokenGuard, session_key
from .models import (
    AccessToken,
    NewAccessToken,
    AuthenticatedIdentity,
    LoginCredentials,
    LoginResult,
    TOKEN_TYPE,
)
from .exceptions import (
    InvalidCredentialsError,
    NotActivatedError,
    NotVerifiedError,
    UnauthenticatedError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenService",
    "IGuard",
    "IAccessTokenRepository",
    # Guards
    "AuthContext",
    "SessionGuard",
    "TokenGuard",
    "session_key",
    # Models
    "AccessToken",
    "NewAccessToken",
    "AuthenticatedIdentity",
    "LoginCredentials",
    "LoginResult",
    "TOKEN_TYPE",
    # Exceptions
    "InvalidCredentialsError",
    "NotActivatedError",
    "NotVerifiedError",
    "UnauthenticatedError",
]
