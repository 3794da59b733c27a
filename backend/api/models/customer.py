"""
Customer endpoint response models.

These wrap CustomerResource in the ``{"data": ...}`` envelope the
storefront clients expect.
"""

from pydantic import BaseModel, Field

from modules.auth.models import TOKEN_TYPE
from modules.customers.models import CustomerResource


class LoginData(BaseModel):
    customer: CustomerResource
    token: str = Field(..., description="Plaintext bearer token, shown exactly once")
    token_type: str = TOKEN_TYPE


class LoginResponse(BaseModel):
    """Successful login response."""

    data: LoginData
    message: str


class ProfileData(BaseModel):
    customer: CustomerResource


class ProfileResponse(BaseModel):
    """Authenticated customer's profile."""

    data: ProfileData
