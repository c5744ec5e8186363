"""
Shared pytest fixtures for all tests.

This module provides common fixtures used across multiple test modules.

Factories
---------
Import factories directly from their modules:

    from tests.accounts.factories import AuthTokenFactory, UserFactory
    from tests.todos.factories import TodoFactory

Example usage:

    @pytest.mark.django_db
    def test_something():
        user = UserFactory.create(email="test@example.com")
        todo = TodoFactory.create(user=user)
"""

from collections.abc import Callable, Iterator
from typing import Any, cast

import pytest
from django.test import Client, RequestFactory
from django.test.client import WSGIRequest  # type: ignore[attr-defined]

from apps.accounts.tokens import get_token_codec
from apps.core.auth import AuthContext
from apps.core.types import AuthenticatedHttpRequest


@pytest.fixture(autouse=True)
def _reset_token_codec() -> Iterator[None]:
    """Rebuild the cached codec around each test so settings overrides take effect."""
    get_token_codec.cache_clear()
    yield
    get_token_codec.cache_clear()


def make_request_with_auth(request: "WSGIRequest", auth: AuthContext) -> AuthenticatedHttpRequest:
    """
    Set auth on a request and return it typed as AuthenticatedHttpRequest.

    Example:
        request = request_factory.get("/todos")
        request = make_request_with_auth(request, AuthContext(user=user, token=token))
    """
    request.auth = auth  # type: ignore[attr-defined]
    return cast(AuthenticatedHttpRequest, request)


@pytest.fixture
def request_factory() -> RequestFactory:
    """
    Django request factory for unit testing views.

    Use this when you need to call endpoint functions directly without going
    through URL routing and the auth class.
    """
    return RequestFactory()


@pytest.fixture
def api_client() -> Client:
    """
    Django test client for full HTTP request/response cycle tests.

    Example:
        def test_api_root(api_client):
            response = api_client.get("/")
            assert response.status_code == 200
    """
    return Client()


@pytest.fixture
def auth_headers(db) -> Callable[..., dict[str, str]]:
    """
    Factory fixture that logs a user in and returns request headers for them.

    The returned dict can be splatted into Django test client calls.

    Example:
        def test_list(api_client, auth_headers):
            user = UserFactory.create()
            response = api_client.get("/todos", **auth_headers(user))
    """
    from apps.accounts.services import login
    from tests.accounts.factories import DEFAULT_PASSWORD, UserFactory

    def _make_headers(user: Any = None) -> dict[str, str]:
        if user is None:
            user = UserFactory.create()
        result = login(email=user.email, password=DEFAULT_PASSWORD)
        return {"HTTP_AUTH": result.token}

    return _make_headers


@pytest.fixture
def user(db):
    """
    Create a user with the default factory password.

    Example:
        def test_user_action(user):
            assert user.email.endswith("@example.com")
    """
    from tests.accounts.factories import UserFactory

    return UserFactory.create()
