"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory stores and a later
move of token storage to a dedicated service.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import Customer

from .models import AccessToken, AuthenticatedIdentity, LoginCredentials, LoginResult, NewAccessToken


@runtime_checkable
class IAccessTokenRepository(Protocol):
    """Storage contract for personal access tokens."""

    def create(self, data: dict[str, Any]) -> AccessToken:
        ...

    def get_by_id(self, token_id: int) -> Optional[AccessToken]:
        ...

    def get_by_hash(self, token_hash: str) -> Optional[AccessToken]:
        ...

    def list_for_customer(self, customer_id: int) -> list[AccessToken]:
        ...

    def touch(self, token_id: int) -> None:
        """Stamp last_used_at with the current time."""
        ...

    def delete(self, token_id: int) -> bool:
        """Delete a token. Returns False if it did not exist."""
        ...

    def delete_for_customer(self, customer_id: int) -> int:
        """Delete every token of a customer. Returns the number deleted."""
        ...


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for bearer token operations.

    Tokens are opaque to clients. A plaintext token is only available from
    create_token; afterwards it can be validated but never retrieved.
    """

    async def create_token(
        self,
        customer: Customer,
        name: str,
        abilities: Optional[list[str]] = None,
    ) -> NewAccessToken:
        """
        Mint a new named token for a customer.

        Args:
            customer: Token owner
            name: Label used for multi-device tracking
            abilities: Granted abilities (defaults to ["*"])

        Returns:
            NewAccessToken with the one-time plaintext
        """
        ...

    async def authenticate(self, plain_text_token: str) -> Optional[AuthenticatedIdentity]:
        """
        Resolve a plaintext token to its owning customer.

        Returns:
            The identity, or None if the token is unknown, revoked, expired,
            or its customer no longer exists
        """
        ...

    async def revoke(self, token_id: int) -> bool:
        ...

    async def revoke_all(self, customer_id: int) -> int:
        ...


@runtime_checkable
class IGuard(Protocol):
    """An authentication channel that may resolve the acting customer."""

    name: str

    async def user(self) -> Optional[AuthenticatedIdentity]:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """Interface for the customer login flow."""

    async def attempt(self, email: str, password: str) -> Optional[Customer]:
        """
        Check an email/password pair.

        Returns:
            The matching customer regardless of account state, or None
        """
        ...

    async def login(self, credentials: LoginCredentials, session: Any) -> LoginResult:
        """
        Run the login state machine.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            NotActivatedError: Account status is off
            NotVerifiedError: Email is not confirmed
        """
        ...

    async def logout(self, identity: AuthenticatedIdentity, session: Any) -> None:
        ...
