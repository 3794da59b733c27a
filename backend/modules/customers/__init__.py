"""
Customers module.

Read access to customer records and the public customer projection.

Public API:
- ICustomerRepository: Interface for customer lookups
- CustomerResource: Public-facing customer shape
- normalize_email: Canonical form used for storage and lookup
"""

from .interfaces import ICustomerRepository
from .models import CustomerResource
from .repository import normalize_email

__all__ = [
    # Interface
    "ICustomerRepository",
    # Models
    "CustomerResource",
    # Helpers
    "normalize_email",
]
