"""
Base Django settings for the Todo API.

Shared configuration for all environments.
"""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Environment-based configuration using pydantic-settings."""

    SECRET_KEY: str = "django-insecure-change-me-in-production"
    DEBUG: bool = False
    ALLOWED_HOSTS: list[str] = []

    # Database
    DB_ENGINE: str = "django.db.backends.postgresql"
    DB_NAME: str = "todo"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"

    # Bearer tokens
    TOKEN_ENCRYPTION_SECRET: str = "insecure-token-encryption-secret-change-me"
    TOKEN_SIGNING_SECRET: str = "insecure-token-signing-secret-change-me"
    TOKEN_SIGNING_ALGORITHM: str = "HS256"

    # Password policy
    PASSWORD_MIN_LENGTH: int = 7
    PASSWORD_MAX_LENGTH: int = 100

    # Logging
    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = settings.SECRET_KEY

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = settings.DEBUG

ALLOWED_HOSTS = settings.ALLOWED_HOSTS

# Application definition
INSTALLED_APPS = [
    "apps.core",
    "apps.accounts",
    "apps.todos",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "apps.core.middleware.CorrelationIdMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# Database
DATABASES = {
    "default": {
        "ENGINE": settings.DB_ENGINE,
        "NAME": settings.DB_NAME,
        "USER": settings.DB_USER,
        "PASSWORD": settings.DB_PASSWORD,
        "HOST": settings.DB_HOST,
        "PORT": settings.DB_PORT,
    }
}

# Password validation (applied by apps.accounts.services.derive_credential)
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": settings.PASSWORD_MIN_LENGTH},
    },
    {
        "NAME": "apps.accounts.validators.MaximumLengthValidator",
        "OPTIONS": {"max_length": settings.PASSWORD_MAX_LENGTH},
    },
]

# Bearer tokens (see apps.accounts.tokens)
TOKEN_ENCRYPTION_SECRET = settings.TOKEN_ENCRYPTION_SECRET
TOKEN_SIGNING_SECRET = settings.TOKEN_SIGNING_SECRET
TOKEN_SIGNING_ALGORITHM = settings.TOKEN_SIGNING_ALGORITHM

# Logging (configured by apps.core on startup)
LOG_JSON = settings.LOG_JSON
LOG_LEVEL = settings.LOG_LEVEL

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
