"""
Shared test fixtures and utilities.

Provides in-memory stand-ins for the Supabase-backed repositories and
a TestClient wired to them through the service container.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_container, reset_container
from shared.models import Customer
from modules.auth.models import AccessToken
from modules.auth.passwords import hash_password
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.customers.repository import normalize_email


TEST_PASSWORD = "password123"
JSON_HEADERS = {"Accept": "application/json"}


class InMemoryCustomerRepository:
    """Dict-backed ICustomerRepository."""

    def __init__(self) -> None:
        self._rows: dict[int, Customer] = {}
        self._next_id = 1

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self._rows.get(int(customer_id))

    def get_by_email(self, email: str) -> Optional[Customer]:
        normalized = normalize_email(email)
        return next((c for c in self._rows.values() if c.email == normalized), None)

    def create(self, data: dict[str, Any]) -> Customer:
        row = dict(data)
        row["email"] = normalize_email(row["email"])
        customer = Customer(id=self._next_id, **row)
        self._rows[customer.id] = customer
        self._next_id += 1
        return customer

    def update(self, customer_id: int, **changes: Any) -> Customer:
        customer = self._rows[customer_id].model_copy(update=changes)
        self._rows[customer_id] = customer
        return customer

    def delete(self, customer_id: int) -> None:
        self._rows.pop(customer_id, None)


class InMemoryAccessTokenRepository:
    """Dict-backed IAccessTokenRepository."""

    def __init__(self) -> None:
        self._rows: dict[int, AccessToken] = {}
        self._next_id = 1

    def create(self, data: dict[str, Any]) -> AccessToken:
        token = AccessToken(id=self._next_id, **data)
        self._rows[token.id] = token
        self._next_id += 1
        return token

    def get_by_id(self, token_id: int) -> Optional[AccessToken]:
        return self._rows.get(int(token_id))

    def get_by_hash(self, token_hash: str) -> Optional[AccessToken]:
        return next((t for t in self._rows.values() if t.token == token_hash), None)

    def list_for_customer(self, customer_id: int) -> list[AccessToken]:
        return [t for t in self._rows.values() if t.customer_id == customer_id]

    def touch(self, token_id: int) -> None:
        token = self._rows.get(token_id)
        if token is not None:
            self._rows[token_id] = token.model_copy(
                update={"last_used_at": datetime.now(timezone.utc)}
            )

    def delete(self, token_id: int) -> bool:
        return self._rows.pop(int(token_id), None) is not None

    def delete_for_customer(self, customer_id: int) -> int:
        ids = [t.id for t in self.list_for_customer(customer_id)]
        for token_id in ids:
            del self._rows[token_id]
        return len(ids)


@pytest.fixture
def customer_repo() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def token_repo() -> InMemoryAccessTokenRepository:
    return InMemoryAccessTokenRepository()


@pytest.fixture
def make_customer(customer_repo) -> Callable[..., Customer]:
    """Factory creating stored customers; active and verified by default."""

    def _make(
        email: str = "test@example.com",
        password: str = TEST_PASSWORD,
        status: Any = True,
        is_verified: Any = True,
        **fields: Any,
    ) -> Customer:
        data = {
            "email": email,
            "password": hash_password(password),
            "first_name": "Test",
            "last_name": "Customer",
            "status": status,
            "is_verified": is_verified,
        }
        data.update(fields)
        return customer_repo.create(data)

    return _make


@pytest.fixture
def token_service(customer_repo, token_repo) -> TokenService:
    return TokenService(tokens=token_repo, customers=customer_repo)


@pytest.fixture
def auth_service(customer_repo, token_service) -> AuthService:
    return AuthService(customers=customer_repo, tokens=token_service, token_name="customer-api")


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def container(customer_repo, token_repo):
    """Service container backed by the in-memory repositories."""
    container = get_container()
    container.customer_repository = customer_repo
    container.token_repository = token_repo
    return container


@pytest.fixture
def make_client(container) -> Callable[[], TestClient]:
    """
    Factory for fresh clients.

    Each client has its own cookie jar, so a session started by one client
    never leaks into requests made by another.
    """

    def _make() -> TestClient:
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def login(make_client) -> Callable[..., str]:
    """Log in through the API with a throwaway client and return the token."""

    def _login(email: str = "test@example.com", password: str = TEST_PASSWORD) -> str:
        response = make_client().post(
            "/api/customer/login",
            json={"email": email, "password": password},
            headers=JSON_HEADERS,
        )
        assert response.status_code == 200, response.text
        return response.json()["data"]["token"]

    return _login


def bearer(token: str) -> dict[str, str]:
    return {**JSON_HEADERS, "Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Build JSON + Authorization headers for a token."""
    return bearer
