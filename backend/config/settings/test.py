"""
Test settings.

In-memory SQLite, a fast password hasher and fixed token secrets.
"""

from .base import *  # noqa: F403

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

TOKEN_ENCRYPTION_SECRET = "test-token-encryption-secret-0123456789"
TOKEN_SIGNING_SECRET = "test-token-signing-secret-0123456789abcdef"
TOKEN_SIGNING_ALGORITHM = "HS256"

LOG_JSON = False
LOG_LEVEL = "WARNING"
