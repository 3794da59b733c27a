"""
Customers module interface.

Other modules should depend on ICustomerRepository, not the Supabase
implementation. Tests substitute an in-memory store.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import Customer


@runtime_checkable
class ICustomerRepository(Protocol):
    """Lookup contract for the credential store."""

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Get a customer by ID.

        Returns:
            Customer if found, None otherwise
        """
        ...

    def get_by_email(self, email: str) -> Optional[Customer]:
        """
        Get a customer by email, compared case-insensitively.

        Returns:
            Customer if found, None otherwise
        """
        ...

    def create(self, data: dict[str, Any]) -> Customer:
        """
        Insert a customer record.

        Args:
            data: Column values; ``password`` must already be hashed

        Returns:
            The stored Customer with its generated ID
        """
        ...
