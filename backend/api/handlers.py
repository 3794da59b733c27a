"""
Exception handlers.

Maps the shared exception bases onto HTTP responses. Every body is
``{"message": ...}``.
"""

from urllib.parse import quote

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import AuthorizationError
from modules.auth.exceptions import NotVerifiedError, UnauthenticatedError

from .middleware.auth import unauthenticated_handler

ENABLE_RESEND_COOKIE = "enable-resend"
EMAIL_FOR_RESEND_COOKIE = "email-for-resend"


async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"message": exc.message},
    )


async def not_verified_handler(request: Request, exc: NotVerifiedError) -> JSONResponse:
    """
    403 plus two short-lived hints for the resend-verification UI.

    Both cookies are readable by client scripts and expire after
    ``resend_cookie_minutes``. The email is percent-encoded.
    """
    response = await authorization_error_handler(request, exc)
    max_age = get_settings().resend_cookie_minutes * 60
    response.set_cookie(ENABLE_RESEND_COOKIE, "true", max_age=max_age, samesite="lax")
    response.set_cookie(EMAIL_FOR_RESEND_COOKIE, quote(exc.email), max_age=max_age, samesite="lax")
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers; the most specific exception class wins."""
    app.add_exception_handler(UnauthenticatedError, unauthenticated_handler)
    app.add_exception_handler(NotVerifiedError, not_verified_handler)
    app.add_exception_handler(AuthorizationError, authorization_error_handler)
