"""
Customer authentication middleware.

Resolves the acting customer for protected routes, trying the session
first and the bearer token second, and enforces the account-state policy.
Failures are raised as UnauthenticatedError; the handler below shapes the
response for the client (JSON 401 or a redirect to the login page).
"""

import logging
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shared.config import get_settings
from modules.auth.exceptions import UnauthenticatedError
from modules.auth.interfaces import ITokenService
from modules.auth.messages import trans
from modules.auth.models import AuthenticatedIdentity
from modules.customers.interfaces import ICustomerRepository

from ..dependencies import build_auth_context, get_customer_repository, get_token_service

logger = logging.getLogger(__name__)

FLASH_KEY = "_flash"

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def acceptable_types(accept: str) -> list[str]:
    """Media types from an Accept header, highest quality first."""
    ranked = []
    for entry in accept.split(","):
        media_type, *params = [part.strip() for part in entry.split(";")]
        if not media_type:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranked.append((quality, media_type.lower()))
    # sorted() is stable, so equal qualities keep header order
    return [media_type for _, media_type in sorted(ranked, key=lambda item: -item[0])]


def expects_json(request: Request) -> bool:
    """
    Whether the client wants a machine-readable response.

    True when the highest-ranked Accept type is JSON, or for XMLHttpRequest
    calls that accept any content type.
    """
    acceptable = acceptable_types(request.headers.get("Accept", ""))
    preferred = acceptable[0] if acceptable else ""
    if "/json" in preferred or "+json" in preferred:
        return True

    is_ajax = request.headers.get("X-Requested-With", "") == "XMLHttpRequest"
    accepts_any = preferred in ("", "*/*", "*")
    return is_ajax and accepts_any


def flash(request: Request, level: str, message: str) -> None:
    """Store a one-time message for the next page render."""
    messages = dict(request.session.get(FLASH_KEY) or {})
    messages[level] = message
    request.session[FLASH_KEY] = messages


class AuthenticateCustomer:
    """
    Dependency that requires an authenticated, active customer.

    Usage:
        @router.get("/protected")
        async def protected_route(
            identity: AuthenticatedIdentity = Depends(authenticate_customer),
        ):
            return {"customer_id": identity.customer.id}
    """

    def __init__(self, guard: Optional[str] = None):
        self.guard = guard

    async def __call__(
        self,
        request: Request,
        customers: ICustomerRepository = Depends(get_customer_repository),
        tokens: ITokenService = Depends(get_token_service),
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> AuthenticatedIdentity:
        guard = self.guard or get_settings().customer_guard
        bearer = credentials.credentials if credentials else None
        context = build_auth_context(request, guard, customers, tokens, bearer)

        identity = await context.resolve()
        if identity is None:
            logger.debug("No customer resolved for %s", request.url.path)
            raise UnauthenticatedError()

        # Applies to both channels: a disabled account is refused whether
        # it arrived with a session or with a token.
        if not identity.customer.status:
            context.session.logout()
            logger.debug("Customer %s refused: not activated", identity.customer.id)
            raise UnauthenticatedError(trans("not-activated"), warning=True)

        request.state.customer = identity
        return identity


authenticate_customer = AuthenticateCustomer()

# Type alias for cleaner route definitions
RequireCustomer = Depends(authenticate_customer)


async def unauthenticated_handler(request: Request, exc: UnauthenticatedError) -> Response:
    """Shape an authentication failure for the client that asked."""
    if expects_json(request):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": exc.message},
        )

    if exc.warning and exc.message:
        flash(request, "warning", exc.message)

    return RedirectResponse(get_settings().login_url, status_code=status.HTTP_302_FOUND)
