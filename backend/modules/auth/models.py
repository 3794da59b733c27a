"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from email_validator import validate_email
from pydantic import BaseModel, Field, field_validator

from shared.models import Customer


TOKEN_TYPE = "Bearer"


class AccessToken(BaseModel):
    """
    A stored personal access token.

    Only the SHA-256 digest of the secret is kept; the plaintext is shown
    once, when the token is created.
    """

    id: int = Field(..., description="Token ID")
    customer_id: int = Field(..., description="Owning customer")
    name: str = Field(..., description="Label, e.g. customer-api")
    token: str = Field(..., repr=False, description="SHA-256 hex digest of the secret")
    abilities: list[str] = Field(default_factory=lambda: ["*"])
    last_used_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"frozen": True, "extra": "ignore"}


class NewAccessToken(BaseModel):
    """A freshly minted token together with its one-time plaintext."""

    access_token: AccessToken
    plain_text_token: str = Field(..., description="'<id>|<secret>', shown exactly once")


class AuthenticatedIdentity(BaseModel):
    """
    The acting customer for one request.

    Produced by the auth middleware and consumed by route handlers. It has
    no lifecycle beyond the request that resolved it.
    """

    customer: Customer
    guard: str = Field(..., description="Name of the channel that resolved the customer")
    access_token: Optional[AccessToken] = Field(
        None, description="Token that authenticated the request (token channel only)"
    )

    model_config = {"frozen": True}

    @property
    def via_token(self) -> bool:
        return self.access_token is not None


class LoginCredentials(BaseModel):
    """
    Login request body.

    The email keeps the value the client sent; lookups normalize it and
    the resend-verification hint echoes it back unchanged.
    """

    email: str = Field(..., description="Customer email, as entered")
    password: str = Field(..., min_length=1, description="Plaintext password")

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        validate_email(value, check_deliverability=False)
        return value


class LoginResult(BaseModel):
    """Outcome of a successful login."""

    customer: Customer
    token: NewAccessToken
    token_type: str = TOKEN_TYPE
