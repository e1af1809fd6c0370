"""Logging configuration for the GearRate API.

Log records are written to stdout as one JSON object per line so they can be
shipped to a log aggregator as-is. Fields passed through ``extra=`` end up as
top-level keys of the JSON object.
"""

import json
import logging
import sys
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

# Attributes every LogRecord has; anything else came in through ``extra=``
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON string representation of the log record.
        """
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # default=str keeps sets and other non-JSON extras loggable
        return json.dumps(payload, default=str)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application-wide logging with JSON formatting.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    level = getattr(logging, log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its outcome and duration.

    Each request gets a UUID that is logged with both records and returned
    to the client in the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        logger = logging.getLogger("src.api.requests")
        request_id = str(uuid.uuid4())
        started = time.perf_counter()
        base_fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }

        logger.info(
            "Incoming request",
            extra={
                **base_fields,
                "query_params": str(request.query_params),
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    **base_fields,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": _elapsed_ms(started),
                },
                exc_info=True,
            )
            raise

        logger.info(
            "Request completed",
            extra={
                **base_fields,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
