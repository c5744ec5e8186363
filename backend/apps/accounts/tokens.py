"""
Bearer token codec.

A bearer token is the identity payload ``{"id": <user id>, "type": <purpose>}``
encrypted with Fernet, placed in the ``token`` claim of an HS256-signed JWT.
The JWT is what clients send back in the ``Auth`` header.

The codec holds no state beyond its two secrets, which are passed in through
TokenCodecConfig. get_token_codec() builds the process-wide instance from
Django settings.
"""

import base64
import hashlib
import json
from dataclasses import dataclass
from functools import lru_cache

import jwt
from cryptography.fernet import Fernet, InvalidToken
from django.conf import settings

from apps.accounts.exceptions import (
    DecryptionError,
    InvalidSignatureError,
    MalformedPayloadError,
)
from apps.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TokenCodecConfig:
    """Secrets and algorithm used to build and read bearer tokens."""

    encryption_secret: str
    signing_secret: str
    signing_algorithm: str = "HS256"


@dataclass(frozen=True)
class TokenPayload:
    """Identity recovered from a bearer token."""

    user_id: int
    purpose: str


def derive_fernet_key(secret: str) -> bytes:
    """Turn an arbitrary secret string into a valid Fernet key."""
    return base64.urlsafe_b64encode(hashlib.sha256(secret.encode()).digest())


def serialize_payload(user_id: int, purpose: str) -> str:
    """Serialize the identity payload with stable key order and no whitespace."""
    return json.dumps({"id": user_id, "type": purpose}, sort_keys=True, separators=(",", ":"))


class TokenCodec:
    """Issues and decodes encrypted, signed bearer tokens."""

    def __init__(self, config: TokenCodecConfig) -> None:
        self._config = config
        self._fernet = Fernet(derive_fernet_key(config.encryption_secret))

    def issue(self, user_id: int, purpose: str) -> str | None:
        """
        Build a bearer token for a user.

        Args:
            user_id: ID of the user the token identifies
            purpose: Purpose tag, e.g. TokenPurpose.AUTHENTICATION

        Returns:
            The bearer token, or None if purpose is not a string or the
            payload could not be serialized, encrypted or signed.
        """
        if not isinstance(purpose, str):
            return None

        try:
            plaintext = serialize_payload(user_id, purpose)
            ciphertext = self._fernet.encrypt(plaintext.encode()).decode()
            return jwt.encode(
                {"token": ciphertext},
                self._config.signing_secret,
                algorithm=self._config.signing_algorithm,
            )
        except (TypeError, ValueError, jwt.PyJWTError) as e:
            logger.warning("auth_token_issue_failed", user_id=user_id, error=str(e))
            return None

    def decode(self, token: str) -> TokenPayload:
        """
        Recover the identity payload from a bearer token.

        Raises:
            InvalidSignatureError: Envelope is malformed or fails verification
            DecryptionError: Inner ciphertext cannot be decrypted
            MalformedPayloadError: Decrypted plaintext is not an identity payload
        """
        try:
            envelope = jwt.decode(
                token,
                self._config.signing_secret,
                algorithms=[self._config.signing_algorithm],
            )
        except jwt.InvalidTokenError:
            raise InvalidSignatureError("Token signature verification failed.") from None

        ciphertext = envelope.get("token")
        if not isinstance(ciphertext, str):
            raise InvalidSignatureError("Token envelope is malformed.")

        try:
            plaintext = self._fernet.decrypt(ciphertext.encode())
        except InvalidToken:
            raise DecryptionError("Token could not be decrypted.") from None

        try:
            data = json.loads(plaintext)
        except ValueError:
            raise MalformedPayloadError("Token payload is not valid JSON.") from None

        if not isinstance(data, dict):
            raise MalformedPayloadError("Token payload is not an object.")

        user_id = data.get("id")
        purpose = data.get("type")
        # bool is an int subclass
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise MalformedPayloadError("Token payload has no valid user id.")
        if not isinstance(purpose, str):
            raise MalformedPayloadError("Token payload has no valid purpose.")

        return TokenPayload(user_id=user_id, purpose=purpose)


@lru_cache(maxsize=1)
def get_token_codec() -> TokenCodec:
    """
    Get the token codec configured from Django settings (singleton).

    Tests that change the token settings must call get_token_codec.cache_clear().
    """
    return TokenCodec(
        TokenCodecConfig(
            encryption_secret=settings.TOKEN_ENCRYPTION_SECRET,
            signing_secret=settings.TOKEN_SIGNING_SECRET,
            signing_algorithm=settings.TOKEN_SIGNING_ALGORITHM,
        )
    )
