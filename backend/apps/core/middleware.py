"""
Core middleware.
"""

import time
from collections.abc import Callable
from uuid import UUID, uuid4

from django.http import HttpRequest, HttpResponse
from structlog.contextvars import bind_contextvars, clear_contextvars

from apps.core.logging import get_logger

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


def _parse_correlation_id(value: str | None) -> UUID:
    """Return the header value as a UUID, or a fresh one if missing or invalid."""
    if value:
        try:
            return UUID(value)
        except ValueError:
            pass
    return uuid4()


class CorrelationIdMiddleware:
    """
    Assigns a correlation ID to every request and logs its outcome.

    The ID is taken from the X-Correlation-ID header when it holds a valid
    UUID, otherwise generated. It is bound to the structlog context for the
    duration of the request and echoed back on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = _parse_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        request.correlation_id = correlation_id  # type: ignore[attr-defined]

        clear_contextvars()
        bind_contextvars(
            correlation_id=str(correlation_id),
            **{"http.method": request.method, "http.url_details.path": request.path},
        )
        started = time.perf_counter()
        try:
            response = self.get_response(request)
            logger.info(
                "request_finished",
                duration_ms=(time.perf_counter() - started) * 1000,
                **{"http.status_code": response.status_code},
            )
            response[CORRELATION_ID_HEADER] = str(correlation_id)
            return response
        finally:
            clear_contextvars()
