"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Customer(BaseModel):
    """
    A customer record as stored in the credential store.

    Read-only from the point of view of this service. The password hash is
    carried so credentials can be checked, but it must never reach a
    response body; use CustomerResource for that.
    """

    id: int = Field(..., description="Customer ID")
    email: str = Field(..., description="Login email (stored lower-cased)")
    password: str = Field(default="", repr=False, description="Password hash")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    image_url: Optional[str] = Field(None, description="Avatar URL")

    # Account-state flags
    status: bool = Field(default=True, description="Account active")
    is_verified: bool = Field(default=False, description="Email ownership confirmed")

    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    model_config = {
        "frozen": True,
        "extra": "ignore",  # Ignore unrelated columns from the customers table
    }

    @property
    def name(self) -> str:
        """Full name derived from first and last name."""
        return f"{self.first_name} {self.last_name}".strip()
