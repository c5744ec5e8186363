"""
API tests for the /users endpoints.

Runs through the Django test client so routing, the Auth header gate and
response serialization are all exercised.
"""

import pytest
from django.test import Client

from apps.accounts.models import AuthToken, User
from tests.accounts.factories import DEFAULT_PASSWORD, UserFactory


@pytest.mark.django_db
class TestRegisterEndpoint:
    """Tests for POST /users."""

    def test_returns_public_fields_only(self, api_client: Client) -> None:
        """Should return id, email, createdAt and updatedAt and nothing else."""
        response = api_client.post(
            "/users",
            data={"email": "New@Example.com", "password": "password123"},
            content_type="application/json",
        )

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"id", "email", "createdAt", "updatedAt"}
        assert body["email"] == "new@example.com"
        assert User.objects.filter(id=body["id"]).exists()

    def test_rejects_duplicate_email(self, api_client: Client) -> None:
        """Should return 400 when the email is taken."""
        UserFactory.create(email="taken@example.com")

        response = api_client.post(
            "/users",
            data={"email": "TAKEN@example.com", "password": "password123"},
            content_type="application/json",
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "short@example.com", "password": "123456"},
            {"email": "long@example.com", "password": "x" * 101},
            {"email": "not-an-email", "password": "password123"},
            {"email": "missing-password@example.com"},
            {"password": "password123"},
        ],
    )
    def test_rejects_invalid_payload(self, api_client: Client, payload: dict) -> None:
        """Should return 400 for validation failures."""
        response = api_client.post("/users", data=payload, content_type="application/json")

        assert response.status_code == 400
        assert not User.objects.exists()


@pytest.mark.django_db
class TestLoginEndpoint:
    """Tests for POST /users/login."""

    def test_returns_user_and_auth_header(self, api_client: Client) -> None:
        """Should return public user fields and the token in the Auth header."""
        user = UserFactory.create()

        response = api_client.post(
            "/users/login",
            data={"email": user.email, "password": DEFAULT_PASSWORD},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["id"] == user.id
        assert "passwordHash" not in response.json()
        assert response["Auth"]
        assert AuthToken.objects.count() == 1

    def test_issued_token_authenticates(self, api_client: Client) -> None:
        """Should issue a token accepted by protected endpoints."""
        user = UserFactory.create()
        login_response = api_client.post(
            "/users/login",
            data={"email": user.email, "password": DEFAULT_PASSWORD},
            content_type="application/json",
        )

        response = api_client.post(
            "/todos",
            data={"description": "Use the token"},
            content_type="application/json",
            HTTP_AUTH=login_response["Auth"],
        )

        assert response.status_code == 200

    def test_wrong_password_returns_401_without_ledger_row(self, api_client: Client) -> None:
        """Should return 401 and record no token."""
        user = UserFactory.create()

        response = api_client.post(
            "/users/login",
            data={"email": user.email, "password": "wrong-password"},
            content_type="application/json",
        )

        assert response.status_code == 401
        assert "Auth" not in response
        assert not AuthToken.objects.exists()

    def test_unknown_email_returns_401(self, api_client: Client) -> None:
        """Should return 401 for an unregistered email."""
        response = api_client.post(
            "/users/login",
            data={"email": "ghost@example.com", "password": DEFAULT_PASSWORD},
            content_type="application/json",
        )

        assert response.status_code == 401

    def test_missing_fields_return_401(self, api_client: Client) -> None:
        """Should treat absent credentials as bad credentials."""
        response = api_client.post("/users/login", data={}, content_type="application/json")

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": 123, "password": "x"},
            {"email": "a@b.c", "password": ["x"]},
            {"email": None, "password": None},
            {"email": {"address": "a@b.c"}, "password": DEFAULT_PASSWORD},
        ],
    )
    def test_non_string_fields_return_401(self, api_client: Client, payload: dict) -> None:
        """Should treat malformed credentials as bad credentials, not a 400."""
        response = api_client.post("/users/login", data=payload, content_type="application/json")

        assert response.status_code == 401
        assert "Auth" not in response
        assert not AuthToken.objects.exists()


@pytest.mark.django_db
class TestLogoutEndpoint:
    """Tests for DELETE /users/login."""

    def test_logout_twice(self, api_client: Client, auth_headers) -> None:
        """Should return 204 then 401 for the same token."""
        headers = auth_headers()

        first = api_client.delete("/users/login", **headers)
        second = api_client.delete("/users/login", **headers)

        assert first.status_code == 204
        assert second.status_code == 401
        assert not AuthToken.objects.exists()

    def test_logout_only_revokes_presented_token(self, api_client: Client, auth_headers) -> None:
        """Should leave the user's other sessions valid."""
        user = UserFactory.create()
        first_session = auth_headers(user)
        second_session = auth_headers(user)

        api_client.delete("/users/login", **first_session)

        assert api_client.delete("/users/login", **second_session).status_code == 204

    def test_logout_without_token_returns_401(self, api_client: Client) -> None:
        """Should return 401 when no Auth header is sent."""
        response = api_client.delete("/users/login")

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}
