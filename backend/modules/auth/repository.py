"""
Access token repository for database access.

Encapsulates Supabase queries against the ``personal_access_tokens`` table.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository

from .models import AccessToken


class AccessTokenRepository(BaseRepository[AccessToken]):
    """
    Repository for personal access tokens.

    Rows store the digest of the secret only. Revocation is a delete.
    """

    table = "personal_access_tokens"
    model = AccessToken

    def create(self, data: dict[str, Any]) -> AccessToken:
        result = self._db.table(self.table).insert(data).execute()
        return self._map(result.data[0])

    def get_by_id(self, token_id: int) -> Optional[AccessToken]:
        result = self._query().eq("id", int(token_id)).limit(1).execute()
        return self._first(result.data)

    def get_by_hash(self, token_hash: str) -> Optional[AccessToken]:
        result = self._query().eq("token", token_hash).limit(1).execute()
        return self._first(result.data)

    def list_for_customer(self, customer_id: int) -> list[AccessToken]:
        result = (
            self._query()
            .eq("customer_id", int(customer_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map(row) for row in result.data or []]

    def touch(self, token_id: int) -> None:
        now = datetime.now(timezone.utc).isoformat()
        self._db.table(self.table).update({"last_used_at": now}).eq("id", int(token_id)).execute()

    def delete(self, token_id: int) -> bool:
        result = self._db.table(self.table).delete().eq("id", int(token_id)).execute()
        return bool(result.data)

    def delete_for_customer(self, customer_id: int) -> int:
        result = (
            self._db.table(self.table)
            .delete()
            .eq("customer_id", int(customer_id))
            .execute()
        )
        return len(result.data or [])
