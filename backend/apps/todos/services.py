"""
Todo services.

Every function takes the owning user and filters on it, so callers cannot
reach another user's todos by id.
"""

from typing import Any

from apps.accounts.models import User
from apps.core.logging import get_logger
from apps.todos.exceptions import InvalidFilterError, InvalidTodoError, TodoNotFoundError
from apps.todos.models import Todo

logger = get_logger(__name__)

DESCRIPTION_MAX_LENGTH = 250
UPDATABLE_FIELDS = ("description", "completed")


def parse_completed_filter(value: str | None) -> bool | None:
    """
    Parse the ``completed`` query parameter.

    Only the literal strings "true" and "false" are accepted.

    Raises:
        InvalidFilterError: Any other non-None value
    """
    if value is None:
        return None
    if value == "true":
        return True
    if value == "false":
        return False
    raise InvalidFilterError("completed must be 'true' or 'false'.")


def _validate_fields(changes: dict[str, Any]) -> None:
    if "description" in changes:
        description = changes["description"]
        if not isinstance(description, str) or not description:
            raise InvalidTodoError("description must be a non-empty string.")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise InvalidTodoError(
                f"description must be at most {DESCRIPTION_MAX_LENGTH} characters."
            )
    if "completed" in changes and not isinstance(changes["completed"], bool):
        raise InvalidTodoError("completed must be a boolean.")


def list_user_todos(
    user: User,
    completed: bool | None = None,
    q: str | None = None,
) -> list[Todo]:
    """
    List a user's todos.

    Args:
        user: Owner of the todos
        completed: If set, only todos with this completed value
        q: If non-empty, only todos whose description contains it (case-insensitive)
    """
    todos = Todo.objects.filter(user=user)
    if completed is not None:
        todos = todos.filter(completed=completed)
    if q:
        todos = todos.filter(description__icontains=q)
    return list(todos)


def get_user_todo(user: User, todo_id: int) -> Todo:
    """
    Get one of a user's todos.

    Raises:
        TodoNotFoundError: No todo with this id belongs to the user
    """
    try:
        return Todo.objects.get(id=todo_id, user=user)
    except Todo.DoesNotExist:
        raise TodoNotFoundError("Todo not found.") from None


def create_todo(user: User, description: str, completed: bool = False) -> Todo:
    """
    Create a todo owned by the user.

    Raises:
        InvalidTodoError: description or completed is invalid
    """
    _validate_fields({"description": description, "completed": completed})

    todo = Todo.objects.create(user=user, description=description, completed=completed)

    logger.info("todo_created", user_id=user.id, todo_id=todo.id)
    return todo


def update_todo(user: User, todo_id: int, changes: dict[str, Any]) -> Todo:
    """
    Apply a partial update to one of a user's todos.

    Keys other than description and completed are ignored.

    Raises:
        TodoNotFoundError: No todo with this id belongs to the user
        InvalidTodoError: A provided field is invalid
    """
    todo = get_user_todo(user, todo_id)

    attributes = {field: changes[field] for field in UPDATABLE_FIELDS if field in changes}
    _validate_fields(attributes)

    for field, value in attributes.items():
        setattr(todo, field, value)
    todo.save(update_fields=[*attributes, "updated_at"])

    logger.info("todo_updated", user_id=user.id, todo_id=todo.id, fields=sorted(attributes))
    return todo


def delete_todo(user: User, todo_id: int) -> None:
    """
    Delete one of a user's todos.

    Raises:
        TodoNotFoundError: No todo with this id belongs to the user
    """
    deleted, _ = Todo.objects.filter(id=todo_id, user=user).delete()
    if deleted == 0:
        raise TodoNotFoundError("Todo not found.")

    logger.info("todo_deleted", user_id=user.id, todo_id=todo_id)
