"""
Structured logging configuration using structlog.

All application logs are emitted as key/value events so they can be
searched by field in whatever log backend the deployment ships to.

Usage:
    from apps.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("todo_created", user_id=user.id, todo_id=todo.id)

Request-scoped fields bound by CorrelationIdMiddleware:
    - trace_id: Request correlation ID (X-Correlation-ID)
    - http.method: HTTP request method
    - http.url_details.path: Request path
    - usr.id: Authenticated user identifier (bound by the token gate)
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor


def _rename_request_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Emit correlation_id as a string trace_id and duration_ms as integer nanoseconds."""
    if "correlation_id" in event_dict:
        event_dict["trace_id"] = str(event_dict.pop("correlation_id"))
    if "duration_ms" in event_dict:
        event_dict["duration"] = int(event_dict.pop("duration_ms") * 1_000_000)
    return event_dict


def configure_logging(json_format: bool = True, log_level: str = "INFO") -> None:
    """
    Configure structlog for the application.

    Uses stdlib integration so Django's own loggers go through the same
    renderer.

    Args:
        json_format: If True, output JSON (production). If False, pretty console output.
        log_level: Minimum log level to output.
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _rename_request_fields,
    ]

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer()
        pre_chain.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a stdlib-backed structlog logger for the given module name."""
    return structlog.get_logger(name)

