"""
Account services.

Handles registration, password verification, the bearer token ledger,
and login/logout.
"""

import hashlib
from dataclasses import dataclass

from django.contrib.auth.hashers import check_password, get_hasher
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError

from apps.accounts.constants import TokenPurpose
from apps.accounts.exceptions import (
    EmailTakenError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidPasswordError,
    UnknownUserError,
)
from apps.accounts.models import AuthToken, User
from apps.accounts.tokens import get_token_codec
from apps.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Credential:
    """Salt and salted hash derived from a plaintext password."""

    salt: str
    password_hash: str


@dataclass
class LoginResult:
    """Result of a successful login."""

    user: User
    token: str
    token_record: AuthToken


def derive_credential(password: str) -> Credential:
    """
    Derive a storable credential from a plaintext password.

    Validates the password against AUTH_PASSWORD_VALIDATORS, then hashes it
    with the default Django password hasher under a fresh salt.

    Raises:
        InvalidPasswordError: Password is not a string or fails the policy
    """
    if not isinstance(password, str):
        raise InvalidPasswordError("Password must be a string.")

    try:
        validate_password(password)
    except DjangoValidationError as e:
        raise InvalidPasswordError(" ".join(e.messages)) from None

    hasher = get_hasher()
    salt = hasher.salt()
    return Credential(salt=salt, password_hash=hasher.encode(password, salt))


def create_user(email: str, password: str) -> User:
    """
    Register a new user.

    Args:
        email: Email address, stored lowercased
        password: Plaintext password, never stored

    Returns:
        The created User

    Raises:
        InvalidEmailError: Email is not a valid address
        InvalidPasswordError: Password fails the password policy
        EmailTakenError: Email is already registered
    """
    if not isinstance(email, str):
        raise InvalidEmailError("Email must be a string.")

    email = User.objects.normalize_email(email)
    try:
        validate_email(email)
    except DjangoValidationError:
        raise InvalidEmailError("Enter a valid email address.") from None

    if User.objects.filter(email=email).exists():
        raise EmailTakenError("A user with this email already exists.")

    credential = derive_credential(password)

    try:
        user = User.objects.create_user(
            email=email,
            salt=credential.salt,
            password_hash=credential.password_hash,
        )
    except IntegrityError:
        raise EmailTakenError("A user with this email already exists.") from None

    logger.info("user_created", user_id=user.id)
    return user


def authenticate_user(email: str, password: str) -> User:
    """
    Look up a user by email and verify their password.

    Raises:
        InvalidCredentialsError: Inputs are not strings, the user does not
            exist, or the password does not match
    """
    if not isinstance(email, str) or not isinstance(password, str):
        raise InvalidCredentialsError("Invalid email or password.")

    user = User.objects.filter(email=User.objects.normalize_email(email)).first()
    if user is None or not check_password(password, user.password_hash):
        raise InvalidCredentialsError("Invalid email or password.")

    return user


def hash_token(token: str) -> str:
    """Create SHA-256 fingerprint of a bearer token for storage."""
    return hashlib.sha256(token.encode()).hexdigest()


def record_token(token: str) -> AuthToken:
    """Add a bearer token to the ledger."""
    record = AuthToken.objects.create(token_hash=hash_token(token))
    logger.info("auth_token_recorded", token_id=record.id)
    return record


def find_valid_token(token: str) -> AuthToken | None:
    """Return the ledger row for a bearer token, or None if it was never issued or was revoked."""
    return AuthToken.objects.filter(token_hash=hash_token(token)).first()


def revoke_token(record: AuthToken) -> None:
    """
    Remove a ledger row so its bearer token stops authenticating.

    Revoking a row that is already gone is a no-op.
    """
    if record.pk is None:
        return

    token_id = record.pk
    AuthToken.objects.filter(pk=token_id).delete()
    record.pk = None
    logger.info("auth_token_revoked", token_id=token_id)


def resolve_token_user(token: str) -> User:
    """
    Decode a bearer token and load the user it identifies.

    Raises:
        TokenError: Token cannot be decoded (see TokenCodec.decode)
        UnknownUserError: No user exists with the decoded id
    """
    payload = get_token_codec().decode(token)

    user = User.objects.filter(id=payload.user_id).first()
    if user is None:
        raise UnknownUserError("Token refers to an unknown user.")
    return user


def login(email: str, password: str) -> LoginResult:
    """
    Authenticate a user and issue a ledger-backed bearer token.

    No ledger row is created unless a token was actually issued.

    Raises:
        InvalidCredentialsError: Bad credentials or token issue failure
    """
    try:
        user = authenticate_user(email, password)
    except InvalidCredentialsError:
        logger.warning("user_login_failed", reason="bad_credentials")
        raise

    token = get_token_codec().issue(user.id, TokenPurpose.AUTHENTICATION)
    if token is None:
        logger.warning("user_login_failed", reason="token_issue_failed", user_id=user.id)
        raise InvalidCredentialsError("Could not issue token.")

    token_record = record_token(token)

    logger.info("user_login_succeeded", user_id=user.id, token_id=token_record.id)
    return LoginResult(user=user, token=token, token_record=token_record)


def logout(token_record: AuthToken) -> None:
    """Revoke the bearer token used for the current request."""
    revoke_token(token_record)
