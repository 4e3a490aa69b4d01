"""
Centralized logging configuration using structlog

Per-request fields (request id, GraphQL operation) are bound with
``structlog.contextvars`` and merged into every event logged while the
request is being handled.
"""

import logging
import re
import secrets
import sys

import structlog

REQUEST_ID_HEADER = "X-Request-ID"

# Inbound ids are echoed back in a header and written to logs
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def configure_logging(debug: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance (typically for ``__name__``)."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a random 12-character URL-safe request id."""
    return secrets.token_urlsafe(9)


def set_request_context(request_id: str | None = None, operation: str | None = None) -> str:
    """Bind request fields for all subsequent log events.

    A caller-supplied id is kept only if it is short and header-safe;
    otherwise a fresh one is generated.

    Returns:
        The request id that was bound
    """
    if not request_id or not _REQUEST_ID_PATTERN.match(request_id):
        request_id = generate_request_id()

    fields = {"request_id": request_id}
    if operation is not None:
        fields["graphql_operation"] = operation

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**fields)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_request_id() -> str | None:
    """Get the request id bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("request_id")
