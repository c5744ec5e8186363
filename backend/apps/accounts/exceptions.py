"""
Exceptions for accounts app.

Custom exceptions for registration, login and bearer token handling.
"""


class AccountError(Exception):
    """Base exception for account operations."""

    pass


class InvalidEmailError(AccountError):
    """Email address is not syntactically valid."""

    pass


class InvalidPasswordError(AccountError):
    """Password does not satisfy the password policy."""

    pass


class EmailTakenError(AccountError):
    """Another user is already registered with this email."""

    pass


class InvalidCredentialsError(AccountError):
    """Email/password pair does not match a user, or no token could be issued."""

    pass


class TokenError(AccountError):
    """Base exception for bearer token decoding errors."""

    pass


class InvalidSignatureError(TokenError):
    """Token envelope failed verification or is malformed."""

    pass


class DecryptionError(TokenError):
    """Token ciphertext could not be decrypted."""

    pass


class MalformedPayloadError(TokenError):
    """Decrypted token payload is not a valid identity payload."""

    pass


class UnknownUserError(TokenError):
    """Token decoded to a user id with no matching user."""

    pass
