"""
Accounts models - users and the bearer token ledger.
"""

from django.db import models

from apps.core.models import TimestampedModel


class UserManager(models.Manager["User"]):
    """Custom manager for User model."""

    def normalize_email(self, email: str) -> str:
        """Emails are stored and looked up lowercased."""
        return email.lower()

    def create_user(self, email: str, salt: str, password_hash: str) -> "User":
        """
        Create and return a user from an already-derived credential.

        The plaintext password never reaches this layer; see
        apps.accounts.services.derive_credential.
        """
        if not email:
            raise ValueError("Email is required")

        user = self.model(
            email=self.normalize_email(email),
            salt=salt,
            password_hash=password_hash,
        )
        user.save(using=self._db)
        return user


class User(TimestampedModel):
    """
    API user.

    Email is the login identifier and is unique case-insensitively
    because it is always stored lowercased.
    """

    email = models.EmailField(unique=True, db_index=True)
    salt = models.CharField(
        max_length=255,
        help_text="Salt used to derive password_hash",
    )
    password_hash = models.CharField(
        max_length=255,
        help_text="Salted one-way hash of the password",
    )

    objects = UserManager()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.email

    def save(self, *args, **kwargs) -> None:  # type: ignore[no-untyped-def]
        """Lowercase email before every write."""
        if isinstance(self.email, str):
            self.email = self.email.lower()
        super().save(*args, **kwargs)


class AuthToken(models.Model):
    """
    Ledger row for an issued bearer token.

    Only the SHA-256 fingerprint of the token is stored. A row exists for
    as long as the token is valid; logging out deletes it.
    """

    token_hash = models.CharField(
        max_length=64,
        unique=True,
        db_index=True,
        help_text="SHA-256 hash of the bearer token",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"AuthToken {self.pk} ({self.token_hash[:8]}…)"
