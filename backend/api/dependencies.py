"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap in in-memory repositories by assigning them on the container
before the first request.
"""

from typing import Optional

from fastapi import Depends, Request

from shared.config import get_settings
from shared.events import EventDispatcher
from modules.auth.guards import AuthContext, SessionGuard, TokenGuard
from modules.auth.interfaces import IAccessTokenRepository, IAuthService, ITokenService
from modules.customers.interfaces import ICustomerRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self.customer_repository: ICustomerRepository | None = None
        self.token_repository: IAccessTokenRepository | None = None
        self._token_service: ITokenService | None = None
        self._auth_service: IAuthService | None = None
        self._events: EventDispatcher | None = None

    @property
    def customers(self) -> ICustomerRepository:
        """Get the customer repository instance."""
        if self.customer_repository is None:
            from modules.customers.repository import CustomerRepository
            from shared.database import get_supabase_client
            self.customer_repository = CustomerRepository(get_supabase_client())
        return self.customer_repository

    @property
    def access_tokens(self) -> IAccessTokenRepository:
        """Get the access token repository instance."""
        if self.token_repository is None:
            from modules.auth.repository import AccessTokenRepository
            from shared.database import get_supabase_client
            self.token_repository = AccessTokenRepository(get_supabase_client())
        return self.token_repository

    @property
    def tokens(self) -> ITokenService:
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                tokens=self.access_tokens,
                customers=self.customers,
                expiration_minutes=get_settings().token_expiration_minutes,
            )
        return self._token_service

    @property
    def auth(self) -> IAuthService:
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                customers=self.customers,
                tokens=self.tokens,
                token_name=get_settings().token_name,
            )
        return self._auth_service

    @property
    def events(self) -> EventDispatcher:
        """Get the event dispatcher."""
        if self._events is None:
            self._events = EventDispatcher()
        return self._events

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different repositories.
        """
        self.customer_repository = None
        self.token_repository = None
        self._token_service = None
        self._auth_service = None
        self._events = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_customer_repository() -> ICustomerRepository:
    """FastAPI dependency for the customer repository."""
    return get_container().customers


def get_token_service() -> ITokenService:
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service() -> IAuthService:
    """FastAPI dependency for the auth service."""
    return get_container().auth


def get_event_dispatcher() -> EventDispatcher:
    """FastAPI dependency for the event dispatcher."""
    return get_container().events


def session_guard_for(
    request: Request,
    name: str,
    customers: ICustomerRepository,
) -> SessionGuard:
    """
    Session guard for a guard name, cached on request.state.

    Every dependency in one request shares the same guard instance, so a
    logout performed by one is seen by the others.
    """
    guards: dict[str, SessionGuard] = getattr(request.state, "session_guards", None) or {}
    if name not in guards:
        guards[name] = SessionGuard(name, customers, request.session)
        request.state.session_guards = guards
    return guards[name]


def build_auth_context(
    request: Request,
    guard: str,
    customers: ICustomerRepository,
    tokens: ITokenService,
    bearer: Optional[str] = None,
) -> AuthContext:
    """Identity resolution context for one request: session first, then token."""
    session = session_guard_for(request, guard, customers)
    return AuthContext.for_request(session, TokenGuard(tokens, bearer))


def get_session_guard(
    request: Request,
    customers: ICustomerRepository = Depends(get_customer_repository),
) -> SessionGuard:
    """FastAPI dependency for the default customer session guard."""
    return session_guard_for(request, get_settings().customer_guard, customers)
