"""
CSRF verification middleware.

State-changing requests that rely on the session cookie must echo the
session's CSRF token in a header. Three kinds of request skip the check:

- safe methods (GET, HEAD, OPTIONS)
- paths on the exemption list (settings.csrf_except), e.g. the login
  endpoint, which is how a client obtains its first bearer token
- bearer-only requests (``Authorization: Bearer`` and no customer login in
  the session): that channel does not depend on cookies, so a cross-site
  page cannot forge it
"""

import hmac
import logging
import secrets
from fnmatch import fnmatchcase
from typing import Callable, Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.security.utils import get_authorization_scheme_param
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from shared.config import get_settings
from modules.auth.guards import session_key

logger = logging.getLogger(__name__)

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})
SESSION_TOKEN_KEY = "_token"
CSRF_HEADERS = ("X-CSRF-TOKEN", "X-XSRF-TOKEN")
XSRF_COOKIE = "XSRF-TOKEN"

# Laravel-compatible "page expired" status for a token mismatch
HTTP_419_PAGE_EXPIRED = 419


def is_exempt(path: str, patterns: Iterable[str]) -> bool:
    """Match a request path (leading slash ignored) against exemption patterns."""
    path = path.strip("/")
    for pattern in patterns:
        pattern = pattern.strip("/")
        if pattern == path or fnmatchcase(path, pattern):
            return True
    return False


def session_token(request: Request) -> str:
    """The session's CSRF token, created on first use."""
    token = request.session.get(SESSION_TOKEN_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        request.session[SESSION_TOKEN_KEY] = token
    return token


def bearer_only(request: Request, guard: str) -> bool:
    """
    Whether the request is carried by a bearer token alone.

    A bearer header does not count while the session holds a customer
    login: the session is resolved first, so that request still rides on
    the cookie.
    """
    scheme, credentials = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer" or not credentials:
        return False
    return request.session.get(session_key(guard)) is None


class VerifyCsrfToken(BaseHTTPMiddleware):
    """
    Enforces CSRF tokens on cookie-authenticated, state-changing requests.

    Must run inside SessionMiddleware so request.session is available.
    Bearer-only requests pass through without touching the session, so
    the stateless channel never receives cookies from this middleware.
    """

    def __init__(
        self,
        app,
        except_paths: Optional[Iterable[str]] = None,
        guard: Optional[str] = None,
    ):
        super().__init__(app)
        settings = get_settings()
        self.except_paths = list(
            except_paths if except_paths is not None else settings.csrf_except
        )
        self.guard = guard or settings.customer_guard

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if bearer_only(request, self.guard):
            return await call_next(request)

        token = session_token(request)

        if self._should_verify(request) and not self._tokens_match(request, token):
            logger.warning(
                "CSRF token mismatch: %s %s",
                request.method,
                request.url.path,
            )
            return JSONResponse(
                status_code=HTTP_419_PAGE_EXPIRED,
                content={"message": "CSRF token mismatch."},
            )

        response = await call_next(request)
        response.set_cookie(
            XSRF_COOKIE,
            token,
            max_age=get_settings().session_lifetime_minutes * 60,
            samesite="lax",
            secure=get_settings().session_https_only,
        )
        return response

    def _should_verify(self, request: Request) -> bool:
        if request.method in SAFE_METHODS:
            return False
        return not is_exempt(request.url.path, self.except_paths)

    def _tokens_match(self, request: Request, token: str) -> bool:
        for header in CSRF_HEADERS:
            supplied = request.headers.get(header)
            if supplied and hmac.compare_digest(supplied.encode(), token.encode()):
                return True
        return False
