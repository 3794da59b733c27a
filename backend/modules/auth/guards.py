"""
Authentication guards.

A guard is one channel that may identify the acting customer:

- SessionGuard: stateful, backed by the signed session cookie
- TokenGuard: stateless, backed by the bearer token the API layer
  extracted from the ``Authorization`` header

AuthContext threads the guards for one request through the handlers
explicitly; there is no process-wide "current user".
"""

import logging
from typing import Any, MutableMapping, Optional, Sequence

from shared.models import Customer
from modules.customers.interfaces import ICustomerRepository

from .interfaces import IGuard, ITokenService
from .models import AuthenticatedIdentity
from .tokens import TOKEN_GUARD

logger = logging.getLogger(__name__)


def session_key(guard: str) -> str:
    """Session entry holding the logged-in customer ID for a guard."""
    return f"login_{guard}_id"


class SessionGuard(IGuard):
    """Resolves the customer whose ID is stored in the session."""

    def __init__(
        self,
        name: str,
        customers: ICustomerRepository,
        session: MutableMapping[str, Any],
    ):
        self.name = name
        self._customers = customers
        self._session = session
        self._user: Optional[Customer] = None
        self._logged_out = False

    @property
    def session_key(self) -> str:
        return session_key(self.name)

    async def user(self) -> Optional[AuthenticatedIdentity]:
        if self._logged_out:
            return None

        if self._user is None:
            customer_id = self._session.get(self.session_key)
            if customer_id is None:
                return None
            self._user = self._customers.get_by_id(int(customer_id))
            if self._user is None:
                # Stale session pointing at a deleted customer
                self._session.pop(self.session_key, None)
                return None

        return AuthenticatedIdentity(customer=self._user, guard=self.name)

    async def check(self) -> bool:
        return await self.user() is not None

    def login(self, customer: Customer) -> None:
        self._session[self.session_key] = customer.id
        self._user = customer
        self._logged_out = False

    def logout(self) -> None:
        """End the session login. Safe to call when nobody is logged in."""
        self._session.pop(self.session_key, None)
        self._user = None
        self._logged_out = True


class TokenGuard(IGuard):
    """Resolves the customer owning the presented bearer token."""

    name = TOKEN_GUARD

    def __init__(self, tokens: ITokenService, token: Optional[str]):
        self._tokens = tokens
        self._token = token
        self._resolved = False
        self._identity: Optional[AuthenticatedIdentity] = None

    async def user(self) -> Optional[AuthenticatedIdentity]:
        if not self._resolved:
            if self._token:
                self._identity = await self._tokens.authenticate(self._token)
            self._resolved = True
        return self._identity


class AuthContext:
    """
    Request-scoped identity resolution.

    Resolvers are tried in order and the first identity wins. The session
    guard always comes first: it is already established and costs no token
    lookup.
    """

    def __init__(self, session: SessionGuard, resolvers: Sequence[IGuard]):
        self.session = session
        self._resolvers = list(resolvers)

    @classmethod
    def for_request(
        cls,
        session: SessionGuard,
        token: TokenGuard,
    ) -> "AuthContext":
        return cls(session, [session, token])

    async def resolve(self) -> Optional[AuthenticatedIdentity]:
        for resolver in self._resolvers:
            identity = await resolver.user()
            if identity is not None:
                logger.debug("Resolved customer %s via %s", identity.customer.id, resolver.name)
                return identity
        return None
