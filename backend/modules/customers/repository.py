"""
Customer repository for database access.

Encapsulates Supabase queries against the ``customers`` table. Emails are
stored lower-cased so lookups can use plain equality.
"""

from typing import Any, Optional

from shared.models import Customer
from shared.repository import BaseRepository


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class CustomerRepository(BaseRepository[Customer]):
    """
    Repository for customer records.

    Note: This repository does NOT check account state (status or
    verification). The auth service decides what those flags mean.
    """

    table = "customers"
    model = Customer

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        result = self._query().eq("id", int(customer_id)).limit(1).execute()
        return self._first(result.data)

    def get_by_email(self, email: str) -> Optional[Customer]:
        normalized = normalize_email(email)
        if not normalized:
            return None
        result = self._query().eq("email", normalized).limit(1).execute()
        return self._first(result.data)

    def create(self, data: dict[str, Any]) -> Customer:
        """
        Insert a customer record.

        The email is normalized before insert; the password must already be
        hashed by the caller.
        """
        row = dict(data)
        row["email"] = normalize_email(row.get("email", ""))
        if not row["email"]:
            raise ValueError("email_blank")
        result = self._db.table(self.table).insert(row).execute()
        return self._map(result.data[0])
