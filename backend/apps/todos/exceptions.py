"""
Exceptions for todos app.
"""


class TodoError(Exception):
    """Base exception for todo operations."""

    pass


class TodoNotFoundError(TodoError):
    """Todo does not exist or belongs to another user."""

    pass


class InvalidTodoError(TodoError):
    """Todo fields failed validation."""

    pass


class InvalidFilterError(TodoError):
    """List filter value is not accepted."""

    pass
