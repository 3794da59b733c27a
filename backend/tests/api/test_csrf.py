"""Tests for CSRF verification on cookie-authenticated requests."""

import pytest

from api.middleware.csrf import XSRF_COOKIE, is_exempt


LOGIN_URL = "/api/customer/login"
LOGOUT_URL = "/api/customer/logout"
JSON_HEADERS = {"Accept": "application/json"}


@pytest.fixture
def session_client(client, make_customer):
    """A client logged in through the session channel only."""
    make_customer()
    response = client.post(
        LOGIN_URL,
        json={"email": "test@example.com", "password": "password123"},
        headers=JSON_HEADERS,
    )
    assert response.status_code == 200
    return client


class TestIsExempt:
    @pytest.mark.parametrize(
        "path, patterns, expected",
        [
            ("/api/customer/login", ["api/customer/login"], True),
            ("/api/customer/login/", ["/api/customer/login"], True),
            ("/api/customer/logout", ["api/customer/login"], False),
            ("/api/webhooks/stripe", ["api/webhooks/*"], True),
            ("/api/customer/login", [], False),
            ("/API/customer/login", ["api/customer/login"], False),
        ],
    )
    def test_patterns(self, path, patterns, expected):
        assert is_exempt(path, patterns) is expected


class TestVerifyCsrfToken:
    def test_safe_request_sets_xsrf_cookie(self, client):
        response = client.get("/api/health")
        assert response.cookies.get(XSRF_COOKIE)

    def test_token_is_stable_within_a_session(self, client):
        first = client.get("/api/health").cookies.get(XSRF_COOKIE)
        second = client.get("/api/health").cookies.get(XSRF_COOKIE)
        assert first == second

    def test_login_is_exempt(self, client, make_customer):
        """A first-time client has no token yet and must still be able to log in."""
        make_customer()
        response = client.post(
            LOGIN_URL,
            json={"email": "test@example.com", "password": "password123"},
            headers=JSON_HEADERS,
        )
        assert response.status_code == 200

    def test_session_post_without_token_is_rejected(self, session_client):
        response = session_client.post(LOGOUT_URL, headers=JSON_HEADERS)

        assert response.status_code == 419
        assert response.json() == {"message": "CSRF token mismatch."}

    def test_session_post_with_wrong_token_is_rejected(self, session_client):
        response = session_client.post(
            LOGOUT_URL, headers={**JSON_HEADERS, "X-CSRF-TOKEN": "forged"}
        )
        assert response.status_code == 419

    @pytest.mark.parametrize("header", ["X-CSRF-TOKEN", "X-XSRF-TOKEN"])
    def test_session_post_with_matching_token(self, session_client, header):
        token = session_client.cookies.get(XSRF_COOKIE)

        response = session_client.post(LOGOUT_URL, headers={**JSON_HEADERS, header: token})

        assert response.status_code == 200

    def test_bearer_request_bypasses_check(self, make_client, make_customer, login, auth_headers):
        make_customer()
        token = login()

        response = make_client().post(LOGOUT_URL, headers=auth_headers(token))

        assert response.status_code == 200

    @pytest.mark.parametrize("authorization", ["Bearer bogus", "bearer bogus"])
    def test_bearer_header_does_not_exempt_session_request(self, session_client, authorization):
        """The session resolves first, so a bearer header alongside it changes nothing."""
        response = session_client.post(
            LOGOUT_URL, headers={**JSON_HEADERS, "Authorization": authorization}
        )

        assert response.status_code == 419
        assert session_client.get("/api/customer/me", headers=JSON_HEADERS).status_code == 200

    def test_valid_bearer_alongside_session_still_needs_csrf(
        self, session_client, login, auth_headers
    ):
        token = login()

        response = session_client.post(LOGOUT_URL, headers=auth_headers(token))

        assert response.status_code == 419

    def test_bearer_only_request_sets_no_cookies(self, make_client, make_customer, login, auth_headers):
        make_customer()
        token = login()

        response = make_client().get("/api/customer/me", headers=auth_headers(token))

        assert response.status_code == 200
        assert response.headers.get_list("set-cookie") == []

    def test_bearer_only_post_sets_no_cookies(self, make_client, make_customer, login, auth_headers):
        make_customer()
        token = login()

        response = make_client().post(LOGOUT_URL, headers=auth_headers(token))

        assert response.status_code == 200
        assert response.headers.get_list("set-cookie") == []

    def test_check_runs_before_routing(self, client):
        """Unknown state-changing routes are refused before a 404/405 is decided."""
        response = client.post("/api/health", headers=JSON_HEADERS)
        assert response.status_code == 419
