"""
Customer response models.

CustomerResource is the only customer shape that is ever placed in a
response body.
"""

from typing import Optional
from pydantic import BaseModel, Field, StrictBool

from shared.models import Customer


class CustomerResource(BaseModel):
    """
    Public projection of a customer.

    Strips the password hash and every internal flag except is_verified.
    """

    id: int = Field(..., description="Customer ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Full name")
    image_url: Optional[str] = Field(None, description="Avatar URL")
    is_verified: StrictBool = Field(..., description="Whether the email is confirmed")

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerResource":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            name=customer.name,
            image_url=customer.image_url,
            is_verified=bool(customer.is_verified),
        )
