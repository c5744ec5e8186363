"""
Constants for accounts app.

Defines enums and constants used across the accounts module.
"""

from enum import StrEnum


class TokenPurpose(StrEnum):
    """
    Purpose tag embedded in bearer tokens.

    Identifies what an issued token is meant to be used for.
    """

    AUTHENTICATION = "authentication"


AUTH_HEADER = "Auth"
"""Request and response header carrying the bearer token."""
