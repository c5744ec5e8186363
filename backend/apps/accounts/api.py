"""
Users API endpoints.

Handles registration and bearer token login/logout.
"""

from django.http import HttpRequest, HttpResponse
from ninja import Router
from ninja.errors import HttpError

from apps.accounts.constants import AUTH_HEADER
from apps.accounts.exceptions import (
    EmailTakenError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidPasswordError,
)
from apps.accounts.models import User
from apps.accounts.schemas import LoginRequest, RegisterRequest, UserResponse
from apps.accounts.services import create_user, login, logout
from apps.core.schemas import ErrorResponse
from apps.core.security import TokenAuth
from apps.core.types import AuthenticatedHttpRequest

router = Router(tags=["users"])
token_auth = TokenAuth()


@router.post(
    "",
    response={200: UserResponse, 400: ErrorResponse},
    by_alias=True,
    operation_id="registerUser",
    summary="Register a user",
)
def register(request: HttpRequest, payload: RegisterRequest) -> User:
    """Create a user account and return its public fields."""
    try:
        return create_user(email=payload.email, password=payload.password)
    except (InvalidEmailError, InvalidPasswordError, EmailTakenError) as e:
        raise HttpError(400, str(e)) from None


@router.post(
    "/login",
    response={200: UserResponse, 401: ErrorResponse},
    by_alias=True,
    operation_id="loginUser",
    summary="Log in",
    description="Returns the user and sets the bearer token in the Auth response header.",
)
def login_user(request: HttpRequest, response: HttpResponse, payload: LoginRequest) -> User:
    """Verify credentials and issue a bearer token."""
    try:
        result = login(email=payload.email, password=payload.password)
    except InvalidCredentialsError:
        raise HttpError(401, "Unauthorized") from None

    response[AUTH_HEADER] = result.token
    return result.user


@router.delete(
    "/login",
    response={204: None, 401: ErrorResponse},
    auth=token_auth,
    operation_id="logoutUser",
    summary="Log out",
    description="Revokes the bearer token presented in the Auth header.",
)
def logout_user(request: AuthenticatedHttpRequest):
    """Revoke the caller's bearer token."""
    _, token = request.auth.require_auth()
    logout(token)
    return 204, None
