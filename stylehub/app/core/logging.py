"""Logging configuration and management for the StyleHub application.

This module provides the logging system used across the application:
- Structured logging with JSON formatting
- Correlation ID tracking across requests
- Request logging middleware
- Performance monitoring decorator for endpoints

Every log line is a JSON document carrying the service name, environment,
level, message, the correlation id of the request being served and the
keyword fields passed at the call site under ``context``.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Optional

from fastapi import Request, Response
from pythonjsonlogger import jsonlogger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.core.config import get_settings

# Context variable for correlation ID
correlation_id: ContextVar[str] = ContextVar('correlation_id', default='')


class StructuredLogger:
    """Thin wrapper taking keyword fields instead of format arguments.

    ``logger.info("Cloth created", record_id=cloth.id)`` emits the fields
    under ``context``; ``error=`` attaches the exception and its traceback.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, error: Optional[Exception] = None, **fields: Any):
        if not self.logger.isEnabledFor(level):
            return
        if error is not None:
            fields['error_type'] = error.__class__.__name__
            fields['error_message'] = str(error)
        self.logger.log(
            level,
            message,
            exc_info=(type(error), error, error.__traceback__) if error is not None else None,
            extra={'context': fields} if fields else None
        )

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        self._log(logging.ERROR, message, error=error, **kwargs)


class StyleHubJsonFormatter(jsonlogger.JsonFormatter):
    """Adds service metadata and the request correlation id to every record."""

    def __init__(self, service: str, environment: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service
        self.environment = environment

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = self.service
        log_record['environment'] = self.environment
        log_record['correlation_id'] = correlation_id.get()


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware to handle correlation ID for request tracking."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        token = correlation_id.set(
            request.headers.get('X-Correlation-ID', str(uuid.uuid4()))
        )

        try:
            response = await call_next(request)
            response.headers['X-Correlation-ID'] = correlation_id.get()
            return response
        finally:
            correlation_id.reset(token)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request with its status and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        logger = get_logger(__name__)
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                error=e,
                method=request.method,
                path=request.url.path,
                process_time_ms=round((time.time() - start_time) * 1000, 2)
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            client_host=request.client.host if request.client else None,
            process_time_ms=round((time.time() - start_time) * 1000, 2)
        )
        return response


def setup_logging():
    """Install the JSON handler on the root logger."""
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    # The app factory may run more than once per process
    if any(isinstance(h.formatter, StyleHubJsonFormatter) for h in root.handlers):
        return

    json_handler = logging.StreamHandler()
    json_handler.setFormatter(StyleHubJsonFormatter(settings.APP_NAME, settings.ENVIRONMENT.value))
    root.addHandler(json_handler)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)


def monitor_performance(name: str = None):
    """Log how long an endpoint took, and whether it raised."""
    def decorator(func):
        label = name or func.__name__

        @wraps(func)
        async def wrapped(*args, **kwargs):
            logger = get_logger(func.__module__)
            start_time = time.time()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.warning(
                    f"{label} failed",
                    error_type=e.__class__.__name__,
                    process_time_ms=round((time.time() - start_time) * 1000, 2)
                )
                raise

            logger.info(
                f"{label} completed",
                process_time_ms=round((time.time() - start_time) * 1000, 2)
            )
            return result

        return wrapped
    return decorator
