"""
Production settings.

Security-hardened settings for deployed environments.
All secrets are read from environment variables.
"""

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import Settings, settings

DEBUG = False

# Security settings
SECURE_SSL_REDIRECT = True
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

_defaults = Settings.model_fields
for _name in ("SECRET_KEY", "TOKEN_ENCRYPTION_SECRET", "TOKEN_SIGNING_SECRET"):
    if getattr(settings, _name) == _defaults[_name].default:
        raise ImproperlyConfigured(f"{_name} must be set in production.")
