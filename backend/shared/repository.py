"""
Base repository class for database access.

Wraps the Supabase client and the row-to-model mapping every repository
needs, so subclasses only describe their queries.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from supabase import Client


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses set ``table`` and ``model`` and implement domain-specific
    data access methods on top of ``self._db``. Rows are always returned as
    the pydantic ``model``, never as raw dicts.

    Example:
        class CustomerRepository(BaseRepository[Customer]):
            table = "customers"
            model = Customer

            def get_by_id(self, customer_id: int) -> Optional[Customer]:
                result = self._query().eq("id", customer_id).execute()
                return self._first(result.data)
    """

    table: str = ""
    model: type[T]

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _query(self):
        """Start a ``select *`` query on this repository's table."""
        return self._db.table(self.table).select("*")

    def _map(self, row: dict[str, Any]) -> T:
        return self.model.model_validate(row)

    def _first(self, rows: Optional[list[dict[str, Any]]]) -> Optional[T]:
        if not rows:
            return None
        return self._map(rows[0])
