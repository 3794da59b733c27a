"""
Customer session endpoints.

Login issues a bearer token (and a session login); the profile and logout
endpoints accept either channel through the auth middleware.
"""

from fastapi import APIRouter, BackgroundTasks, Depends

from shared.events import CUSTOMER_AFTER_LOGIN, EventDispatcher
from modules.auth.guards import SessionGuard
from modules.auth.interfaces import IAuthService
from modules.auth.messages import trans
from modules.auth.models import AuthenticatedIdentity, LoginCredentials
from modules.customers.models import CustomerResource

from ..dependencies import get_auth_service, get_event_dispatcher, get_session_guard
from ..middleware.auth import RequireCustomer
from ..models.customer import LoginData, LoginResponse, ProfileData, ProfileResponse
from ..models.errors import MessageResponse

router = APIRouter()


@router.post(
    "/login",
    name="customers.session.create",
    response_model=LoginResponse,
    responses={403: {"model": MessageResponse}},
)
async def login(
    credentials: LoginCredentials,
    background_tasks: BackgroundTasks,
    session: SessionGuard = Depends(get_session_guard),
    auth: IAuthService = Depends(get_auth_service),
    events: EventDispatcher = Depends(get_event_dispatcher),
) -> LoginResponse:
    """
    Log a customer in.

    Returns the customer and a bearer token. The token is only ever shown
    in this response.
    """
    result = await auth.login(credentials, session)

    # Listeners (cart merge etc.) run after the response is sent
    if events.has_listeners(CUSTOMER_AFTER_LOGIN):
        background_tasks.add_task(events.dispatch, CUSTOMER_AFTER_LOGIN, result.customer)

    return LoginResponse(
        data=LoginData(
            customer=CustomerResource.from_customer(result.customer),
            token=result.token.plain_text_token,
            token_type=result.token_type,
        ),
        message=trans("logged-in"),
    )


@router.get(
    "/me",
    name="customers.me",
    response_model=ProfileResponse,
    responses={401: {"model": MessageResponse}},
)
async def me(identity: AuthenticatedIdentity = RequireCustomer) -> ProfileResponse:
    """
    Get the authenticated customer's profile.

    Requires a session or a bearer token.
    """
    return ProfileResponse(
        data=ProfileData(customer=CustomerResource.from_customer(identity.customer)),
    )


@router.post(
    "/logout",
    name="customers.session.destroy",
    response_model=MessageResponse,
    responses={401: {"model": MessageResponse}},
)
async def logout(
    identity: AuthenticatedIdentity = RequireCustomer,
    session: SessionGuard = Depends(get_session_guard),
    auth: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Revoke the presented bearer token and end the session."""
    await auth.logout(identity, session)
    return MessageResponse(message=trans("logged-out"))
