"""Todos app configuration."""

from django.apps import AppConfig


class TodosConfig(AppConfig):
    """Configuration for todos app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.todos"
