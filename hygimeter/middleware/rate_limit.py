"""Redis-backed rate limiting middleware."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from hygimeter.config import get_settings

_LIMITED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class RateLimitMiddleware(BaseHTTPMiddleware):
	"""Per-client quota on mutating API calls, backed by Redis atomic counters."""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		if not self._is_limited(request.method, request.url.path):
			return await call_next(request)

		redis_client = getattr(request.app.state, "redis", None)
		if redis_client is None:
			return await call_next(request)

		quota = get_settings().rate_limit_per_minute
		client = self._client_key(request)
		minute_bucket = datetime.now(UTC).strftime("%Y%m%d%H%M")
		key = f"ratelimit:{client}:{minute_bucket}"
		current = await redis_client.incr(key)
		if current == 1:
			await redis_client.expire(key, 65)

		if current > quota:
			return JSONResponse(
				status_code=429,
				content={
					"detail": {
						"error": "rate_limited",
						"message": "Write quota exceeded",
						"client": client,
						"quota": quota,
					}
				},
			)

		return await call_next(request)

	@staticmethod
	def _is_limited(method: str, path: str) -> bool:
		return method in _LIMITED_METHODS and path.startswith("/api/v1")

	@staticmethod
	def _client_key(request: Request) -> str:
		forwarded = request.headers.get("x-forwarded-for")
		if forwarded:
			return forwarded.split(",")[0].strip()
		if request.client is not None:
			return request.client.host
		return "unknown"
