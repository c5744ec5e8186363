"""
Django Ninja API configuration.
"""

from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI
from ninja.errors import ValidationError

from apps.accounts.api import router as users_router
from apps.core.logging import get_logger
from apps.todos.api import router as todos_router

logger = get_logger(__name__)

api = NinjaAPI(
    title="Todo API",
    version="1.0.0",
    description="Multi-user to-do list API with bearer token authentication.",
    openapi_extra={
        "tags": [
            {
                "name": "users",
                "description": "Registration and bearer token login/logout",
            },
            {
                "name": "todos",
                "description": "The authenticated user's to-do items",
            },
        ],
    },
)

# Register routers
api.add_router("/users", users_router)
api.add_router("/todos", todos_router)


@api.exception_handler(ValidationError)
def validation_error_handler(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    """Report request validation failures as 400 rather than 422."""
    return api.create_response(request, {"detail": exc.errors}, status=400)


@api.exception_handler(DatabaseError)
def database_error_handler(request: HttpRequest, exc: DatabaseError) -> HttpResponse:
    """Report backing-store failures as a generic 500."""
    logger.exception("database_error", error=str(exc))
    return api.create_response(request, {"detail": "Internal server error"}, status=500)


@api.get("/", tags=["health"], operation_id="apiRoot", summary="API root")
def root(request: HttpRequest) -> HttpResponse:
    """Plain-text banner, also usable as a health check."""
    return HttpResponse("Todo API Root", content_type="text/plain")
