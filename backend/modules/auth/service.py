"""
Authentication service implementation.

Runs the customer login state machine:

    credentials -> activation -> verification -> token

Each rejection ends the session login that the credential check started,
so a disabled or unverified customer never leaves with a usable session or
token.
"""

import logging
from typing import Optional

from shared.config import get_settings
from shared.models import Customer
from modules.customers.interfaces import ICustomerRepository

from .exceptions import InvalidCredentialsError, NotActivatedError, NotVerifiedError
from .guards import SessionGuard
from .interfaces import IAuthService, ITokenService
from .models import AuthenticatedIdentity, LoginCredentials, LoginResult
from .passwords import verify_password

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Customer lookups go through ICustomerRepository and token issuance
    through ITokenService; neither is touched directly.
    """

    def __init__(
        self,
        customers: ICustomerRepository,
        tokens: ITokenService,
        token_name: Optional[str] = None,
    ):
        self._customers = customers
        self._tokens = tokens
        self._token_name = token_name or get_settings().token_name

    async def attempt(self, email: str, password: str) -> Optional[Customer]:
        customer = self._customers.get_by_email(email)
        if customer is None:
            return None
        if not verify_password(password, customer.password):
            return None
        return customer

    async def login(self, credentials: LoginCredentials, session: SessionGuard) -> LoginResult:
        """
        Log a customer in and mint a bearer token.

        Args:
            credentials: Email and password from the request body
            session: The request's session guard

        Returns:
            LoginResult with the customer and the one-time plaintext token

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            NotActivatedError: Account status is off
            NotVerifiedError: Email is not confirmed
        """
        customer = await self.attempt(credentials.email, credentials.password)
        if customer is None:
            logger.info("Login rejected: invalid credentials")
            raise InvalidCredentialsError()

        session.login(customer)

        if not customer.status:
            session.logout()
            logger.info("Login rejected for customer %s: not activated", customer.id)
            raise NotActivatedError()

        if not customer.is_verified:
            session.logout()
            logger.info("Login rejected for customer %s: email not verified", customer.id)
            raise NotVerifiedError(email=credentials.email)

        token = await self._tokens.create_token(customer, self._token_name)
        logger.info("Customer %s logged in", customer.id)

        return LoginResult(customer=customer, token=token)

    async def logout(self, identity: AuthenticatedIdentity, session: SessionGuard) -> None:
        """
        Log the acting customer out.

        Revokes the bearer token that authenticated this request, if any,
        and ends the session login. Other tokens of the customer stay valid.
        """
        if identity.via_token:
            await self._tokens.revoke(identity.access_token.id)
        session.logout()
        logger.info("Customer %s logged out", identity.customer.id)
