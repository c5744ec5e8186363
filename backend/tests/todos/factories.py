"""
Factories for todos app models.
"""

from typing import Any

import factory
from factory.django import DjangoModelFactory

from apps.todos.models import Todo


class TodoFactory(DjangoModelFactory[Todo]):
    """Factory for Todo model."""

    class Meta:
        model = Todo

    user: Any = factory.SubFactory("tests.accounts.factories.UserFactory")
    description: Any = factory.Faker("sentence", nb_words=4)
    completed = False
