"""Structured logging setup and per-request log events with request IDs."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from hygimeter.config import LogFormat, get_settings

REQUEST_ID_HEADER = "x-request-id"

_configured = False


def configure_structured_logging() -> None:
	"""Route structlog through a JSON or console renderer; idempotent."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

	if settings.log_format == LogFormat.json:
		renderer: Any = structlog.processors.JSONRenderer()
		logging.basicConfig(level=log_level, format="%(message)s")
	else:
		renderer = structlog.dev.ConsoleRenderer()
		logging.basicConfig(level=log_level)

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			renderer,
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind a request ID for the duration of a request and log its outcome.

	The ID is taken from the incoming ``x-request-id`` header when present
	and echoed back on the response, so log lines emitted by the services
	(``plan_pattern_created`` and friends) can be joined to the HTTP call.
	Health probes log at debug level to keep the stream readable.
	"""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
		request.state.request_id = request_id

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(
			request_id=request_id,
			method=request.method,
			path=request.url.path,
		)
		logger = structlog.get_logger("hygimeter.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception:
			logger.exception("http_request_failed", duration_ms=_elapsed_ms(start))
			raise

		response.headers[REQUEST_ID_HEADER] = request_id
		log = logger.debug if request.url.path.startswith("/health") else logger.info
		log(
			"http_request",
			status_code=response.status_code,
			duration_ms=_elapsed_ms(start),
		)
		return response


def _elapsed_ms(start: float) -> float:
	return round((time.perf_counter() - start) * 1000.0, 2)
