"""
Todo API endpoints.

All endpoints require a bearer token and only ever touch the caller's todos.
"""

from ninja import Router
from ninja.errors import HttpError

from apps.core.schemas import ErrorResponse
from apps.core.security import TokenAuth
from apps.core.types import AuthenticatedHttpRequest
from apps.todos.exceptions import InvalidFilterError, InvalidTodoError, TodoNotFoundError
from apps.todos.models import Todo
from apps.todos.schemas import CreateTodoRequest, TodoResponse, UpdateTodoRequest
from apps.todos.services import (
    create_todo,
    delete_todo,
    get_user_todo,
    list_user_todos,
    parse_completed_filter,
    update_todo,
)

router = Router(tags=["todos"])
token_auth = TokenAuth()


@router.get(
    "",
    response={200: list[TodoResponse], 400: ErrorResponse, 404: ErrorResponse},
    auth=token_auth,
    by_alias=True,
    operation_id="listTodos",
    summary="List todos",
    description="List the caller's todos. Returns 404 when nothing matches.",
)
def list_todos(
    request: AuthenticatedHttpRequest,
    completed: str | None = None,
    q: str | None = None,
) -> list[Todo]:
    """List todos, optionally filtered by completed state and description substring."""
    user, _ = request.auth.require_auth()

    try:
        completed_filter = parse_completed_filter(completed)
    except InvalidFilterError as e:
        raise HttpError(400, str(e)) from None

    todos = list_user_todos(user, completed=completed_filter, q=q)
    if not todos:
        raise HttpError(404, "No todos found")

    return todos


@router.get(
    "/{todo_id}",
    response={200: TodoResponse, 404: ErrorResponse},
    auth=token_auth,
    by_alias=True,
    operation_id="getTodo",
    summary="Get a todo",
)
def get_todo(request: AuthenticatedHttpRequest, todo_id: int) -> Todo:
    """Get one of the caller's todos."""
    user, _ = request.auth.require_auth()

    try:
        return get_user_todo(user, todo_id)
    except TodoNotFoundError as e:
        raise HttpError(404, str(e)) from None


@router.post(
    "",
    response={200: TodoResponse, 400: ErrorResponse},
    auth=token_auth,
    by_alias=True,
    operation_id="createTodo",
    summary="Create a todo",
)
def post_todo(request: AuthenticatedHttpRequest, payload: CreateTodoRequest) -> Todo:
    """Create a todo owned by the caller."""
    user, _ = request.auth.require_auth()

    try:
        return create_todo(user, description=payload.description, completed=payload.completed)
    except InvalidTodoError as e:
        raise HttpError(400, str(e)) from None


@router.put(
    "/{todo_id}",
    response={200: TodoResponse, 400: ErrorResponse, 404: ErrorResponse},
    auth=token_auth,
    by_alias=True,
    operation_id="updateTodo",
    summary="Update a todo",
)
def put_todo(
    request: AuthenticatedHttpRequest,
    todo_id: int,
    payload: UpdateTodoRequest,
) -> Todo:
    """Update description and/or completed on one of the caller's todos."""
    user, _ = request.auth.require_auth()

    try:
        return update_todo(user, todo_id, payload.model_dump(exclude_unset=True))
    except TodoNotFoundError as e:
        raise HttpError(404, str(e)) from None
    except InvalidTodoError as e:
        raise HttpError(400, str(e)) from None


@router.delete(
    "/{todo_id}",
    response={204: None, 404: ErrorResponse},
    auth=token_auth,
    operation_id="deleteTodo",
    summary="Delete a todo",
)
def remove_todo(request: AuthenticatedHttpRequest, todo_id: int):
    """Delete one of the caller's todos."""
    user, _ = request.auth.require_auth()

    try:
        delete_todo(user, todo_id)
    except TodoNotFoundError as e:
        raise HttpError(404, str(e)) from None

    return 204, None
