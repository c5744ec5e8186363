"""
Authentication context for request lifecycle.

Provides a typed container for authentication state that the token gate
populates and endpoints consume.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ninja.errors import HttpError

if TYPE_CHECKING:
    from apps.accounts.models import AuthToken, User


@dataclass
class AuthContext:
    """
    Authentication context attached to requests by TokenAuth.

    django-ninja stores the value returned by the auth class as
    ``request.auth``, so handlers read the caller from here.

    Attributes:
        user: The authenticated User, or None if not authenticated
        token: The ledger row matching the presented bearer token, or None
    """

    user: "User | None" = None
    token: "AuthToken | None" = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries a resolved user and ledger row."""
        return self.user is not None and self.token is not None

    def require_auth(self) -> tuple["User", "AuthToken"]:
        """
        Get authenticated context or raise 401.

        Returns:
            Tuple of (user, token)

        Raises:
            HttpError 401: If not authenticated
        """
        if self.user is None or self.token is None:
            raise HttpError(401, "Unauthorized")
        return self.user, self.token
