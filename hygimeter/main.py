"""FastAPI application entrypoint: lifespan, routers, middleware."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from redis.asyncio import Redis
from redis.exceptions import RedisError
from sqlalchemy import text

from hygimeter.config import get_settings
from hygimeter.database import engine
from hygimeter.middleware.logging import (
	RequestLoggingMiddleware,
	configure_structured_logging,
)
from hygimeter.middleware.rate_limit import RateLimitMiddleware
from hygimeter.routes import microclimates, plan_patterns

VERSION = "0.1.0"

logger = structlog.get_logger("hygimeter")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
	"""Application startup / shutdown lifecycle.

	Startup:
	  1. Initialize structured logging
	  2. Verify the database answers
	  3. Connect to Redis (optional: rate limiting is skipped without it)

	Shutdown:
	  1. Close Redis connection pool
	  2. Dispose SQLAlchemy engine
	"""
	configure_structured_logging()
	settings = get_settings()
	logger.info("hygimeter_starting", log_level=settings.log_level, version=VERSION)

	try:
		async with engine.connect() as connection:
			await connection.execute(text("SELECT 1"))
	except Exception as exc:
		logger.exception("startup_failure", error=str(exc))
		raise

	redis: Redis | None = Redis.from_url(settings.redis_url, decode_responses=True)
	try:
		await redis.ping()
	except RedisError as exc:
		logger.warning("redis_unavailable", error=str(exc))
		await redis.aclose()
		redis = None
	app.state.redis = redis

	yield

	logger.info("hygimeter_shutting_down")
	if redis is not None:
		await redis.aclose()
	await engine.dispose()


app = FastAPI(
	title="Hygimeter API",
	description=(
		"Plan pattern management for greenhouse and terrarium controllers: "
		"microclimate targets, temperature schedules and lights-off times "
		"per controlled device."
	),
	version=VERSION,
	lifespan=lifespan,
	docs_url="/docs",
	redoc_url="/redoc",
)

# Outermost last: request IDs are bound before rate limiting runs.
app.add_middleware(RateLimitMiddleware)
app.add_middleware(RequestLoggingMiddleware)


async def _run_readiness_checks(app: FastAPI) -> dict[str, dict[str, Any]]:
	checks: dict[str, dict[str, Any]] = {}

	try:
		async with engine.connect() as connection:
			await connection.execute(text("SELECT 1"))
		checks["database"] = {"ok": True, "message": "ok"}
	except Exception as exc:
		checks["database"] = {"ok": False, "message": str(exc)}

	redis: Redis | None = getattr(app.state, "redis", None)
	if redis is None:
		checks["redis"] = {"ok": False, "message": "not connected"}
	else:
		try:
			await redis.ping()
			checks["redis"] = {"ok": True, "message": "ok"}
		except RedisError as exc:
			checks["redis"] = {"ok": False, "message": str(exc)}

	return checks


# ── Health checks ───────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
	"""Basic health check: verifies the API process is alive."""
	return {
		"status": "ok",
		"service": "hygimeter",
		"version": VERSION,
	}


@app.get("/health/ready", tags=["system"])
async def readiness_check() -> JSONResponse:
	"""Dependency readiness: 503 when any backing service is down."""
	checks = await _run_readiness_checks(app)
	ready = all(check["ok"] for check in checks.values())
	return JSONResponse(
		status_code=200 if ready else 503,
		content={"status": "ok" if ready else "degraded", "checks": checks},
	)


# ── Router registration ────────────────────────────────────────────────────
app.include_router(plan_patterns.router, prefix="/api/v1")
app.include_router(microclimates.router, prefix="/api/v1")
