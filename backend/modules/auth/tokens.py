"""
Personal access token service.

Issues, validates and revokes opaque bearer tokens. The plaintext handed to
the client is ``"<id>|<secret>"``; only sha256(secret) is stored, so a token
can be checked but never read back.
"""

import hashlib
import hmac
import logging
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Optional

from shared.models import Customer
from modules.customers.interfaces import ICustomerRepository

from .interfaces import IAccessTokenRepository, ITokenService
from .models import AccessToken, AuthenticatedIdentity, NewAccessToken

logger = logging.getLogger(__name__)

TOKEN_GUARD = "token"
SECRET_LENGTH = 40
_ALPHABET = string.ascii_letters + string.digits


def hash_token(secret: str) -> str:
    return hashlib.sha256(secret.encode()).hexdigest()


def generate_secret(length: int = SECRET_LENGTH) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


class TokenService(ITokenService):
    """
    Implementation of the token service.

    Each create_token call is independent: a customer may hold any number
    of tokens, and revoking one leaves the others untouched.
    """

    def __init__(
        self,
        tokens: IAccessTokenRepository,
        customers: ICustomerRepository,
        expiration_minutes: Optional[int] = None,
    ):
        self._tokens = tokens
        self._customers = customers
        self._expiration_minutes = expiration_minutes

    async def create_token(
        self,
        customer: Customer,
        name: str,
        abilities: Optional[list[str]] = None,
    ) -> NewAccessToken:
        secret = generate_secret()
        now = datetime.now(timezone.utc)
        data = {
            "customer_id": customer.id,
            "name": name,
            "token": hash_token(secret),
            "abilities": abilities or ["*"],
            "created_at": now.isoformat(),
        }
        if self._expiration_minutes:
            data["expires_at"] = (now + timedelta(minutes=self._expiration_minutes)).isoformat()

        access_token = self._tokens.create(data)
        logger.info("Issued access token %s (%s) for customer %s", access_token.id, name, customer.id)

        return NewAccessToken(
            access_token=access_token,
            plain_text_token=f"{access_token.id}|{secret}",
        )

    async def find_token(self, plain_text_token: str) -> Optional[AccessToken]:
        """
        Look up the stored token for a plaintext value.

        Accepts both ``"<id>|<secret>"`` and a bare secret.
        """
        if not plain_text_token:
            return None

        if "|" not in plain_text_token:
            return self._tokens.get_by_hash(hash_token(plain_text_token))

        token_id, _, secret = plain_text_token.partition("|")
        if not token_id.isdigit() or not secret:
            return None

        token = self._tokens.get_by_id(int(token_id))
        if token is None:
            return None
        if not hmac.compare_digest(token.token, hash_token(secret)):
            return None
        return token

    def is_expired(self, token: AccessToken, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        if token.expires_at is not None and token.expires_at <= now:
            return True
        if self._expiration_minutes and token.created_at is not None:
            return token.created_at + timedelta(minutes=self._expiration_minutes) <= now
        return False

    async def authenticate(self, plain_text_token: str) -> Optional[AuthenticatedIdentity]:
        token = await self.find_token(plain_text_token)
        if token is None or self.is_expired(token):
            return None

        customer = self._customers.get_by_id(token.customer_id)
        if customer is None:
            return None

        self._tokens.touch(token.id)
        return AuthenticatedIdentity(customer=customer, guard=TOKEN_GUARD, access_token=token)

    async def revoke(self, token_id: int) -> bool:
        revoked = self._tokens.delete(token_id)
        if revoked:
            logger.info("Revoked access token %s", token_id)
        return revoked

    async def revoke_all(self, customer_id: int) -> int:
        count = self._tokens.delete_for_customer(customer_id)
        logger.info("Revoked %d access token(s) for customer %s", count, customer_id)
        return count
