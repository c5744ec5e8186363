"""
Core security - authentication classes for API.
"""

from django.http import HttpRequest
from ninja.security import APIKeyHeader
from structlog.contextvars import bind_contextvars

from apps.accounts.constants import AUTH_HEADER
from apps.accounts.exceptions import TokenError
from apps.accounts.services import find_valid_token, resolve_token_user
from apps.core.auth import AuthContext
from apps.core.logging import get_logger

logger = get_logger(__name__)


class TokenAuth(APIKeyHeader):
    """
    Bearer token authentication for API endpoints.

    Reads the token from the Auth header, checks it against the ledger,
    decodes it and loads the user. Every failure returns None, which
    django-ninja turns into the same 401 response.
    """

    param_name = AUTH_HEADER

    def authenticate(self, request: HttpRequest, key: str | None) -> AuthContext | None:
        bearer = key or ""

        token = find_valid_token(bearer)
        if token is None:
            logger.warning("auth_token_rejected", reason="not_in_ledger")
            return None

        try:
            user = resolve_token_user(bearer)
        except TokenError as e:
            logger.warning("auth_token_rejected", reason=type(e).__name__, token_id=token.id)
            return None

        bind_contextvars(**{"usr.id": str(user.id)})
        return AuthContext(user=user, token=token)
