"""
Structured logging for the portal, built on structlog over stdlib logging.

Every record, ours or a library's, goes through one ProcessorFormatter:
console output in development, JSON lines anywhere else. Store and
service modules log snake_case events (collection_seeded,
fixture_load_failed, job_created, ...) with entity ids as key/values;
inside an HTTP request each line also carries request_id, method and path.
"""
import logging
import sys
import time
import uuid
from typing import List, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from placement_portal.core.config import settings

# Libraries whose INFO chatter drowns out store events
QUIET_LOGGERS = ("uvicorn.access", "httpx", "redis")


def _pre_chain() -> List:
    """Processors applied to structlog and foreign (stdlib) records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def _formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        tail = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer()]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def setup_logging(json_logs: Optional[bool] = None, stream=None) -> None:
    """
    Configure structlog and the root logger. Safe to call more than once;
    each call replaces the root handlers.

    json_logs defaults to True outside the development environment.
    """
    if json_logs is None:
        json_logs = settings.environment != "development"

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(_formatter(json_logs))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind a request ID (and method/path) to every log line of a request,
    then log one request_completed event with the elapsed time.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        logger.info("request_completed", status_code=response.status_code, elapsed_ms=elapsed_ms)
        response.headers["X-Request-ID"] = request_id
        return response
