"""Shared pytest fixtures: async test client, fake sessions, in-memory repositories."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, time
from typing import Any
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from hygimeter.database import get_db
from hygimeter.main import app
from hygimeter.schemas.microclimate import HumiditySchema, MicroclimateSchema
from hygimeter.schemas.plan_pattern import PlanParametersSchema, PlanPatternWrite


class FakeAsyncSession:
	def __init__(self) -> None:
		self.commit = AsyncMock()
		self.rollback = AsyncMock()
		self.close = AsyncMock()
		self.execute = AsyncMock()


class FakeRedis:
	def __init__(self) -> None:
		self._counter: dict[str, int] = {}
		self.incr = AsyncMock(side_effect=self._incr)
		self.expire = AsyncMock(return_value=True)
		self.ping = AsyncMock(return_value=True)

	async def _incr(self, key: str) -> int:
		value = self._counter.get(key, 0) + 1
		self._counter[key] = value
		return value


class InMemoryRepository:
	"""Dict-backed stand-in for the SQLAlchemy repositories.

	Assigns integer ids the way the database identity column would and
	records every write so tests can assert that none happened.
	"""

	def __init__(self) -> None:
		self.rows: dict[int, Any] = {}
		self.saved: list[Any] = []
		self.deleted: list[int] = []
		self._next_id = 1

	def _assign_id(self, entity: Any) -> None:
		if getattr(entity, "id", None) is None:
			entity.id = self._next_id
			self._next_id += 1

	def seed(self, entity: Any) -> Any:
		self._assign_id(entity)
		now = datetime.now(UTC)
		entity.created_at = now
		entity.updated_at = now
		self.rows[entity.id] = entity
		return entity

	async def save(self, entity: Any) -> Any:
		now = datetime.now(UTC)
		self._assign_id(entity)
		if getattr(entity, "created_at", None) is None:
			entity.created_at = now
		entity.updated_at = now
		owned = getattr(entity, "plan_parameters", None)
		if owned is not None and owned.id is None:
			owned.id = 1000 + entity.id
		for index, plan in enumerate(getattr(entity, "microclimate_plans", None) or []):
			if plan.id is None:
				plan.id = entity.id * 100 + index
		self.rows[entity.id] = entity
		self.saved.append(entity)
		return entity

	async def find_by_id(self, entity_id: int) -> Any | None:
		return self.rows.get(entity_id)

	async def find_all(self) -> list[Any]:
		return [self.rows[key] for key in sorted(self.rows)]

	async def delete_by_id(self, entity_id: int) -> None:
		self.rows.pop(entity_id, None)
		self.deleted.append(entity_id)


@pytest.fixture
def fake_db_session() -> FakeAsyncSession:
	"""A lightweight async-session stub for dependency overrides in API tests."""
	return FakeAsyncSession()


@pytest.fixture
def fake_redis() -> FakeRedis:
	return FakeRedis()


@pytest.fixture
def memory_repository() -> InMemoryRepository:
	return InMemoryRepository()


@pytest.fixture
def create_payload() -> PlanPatternWrite:
	return PlanPatternWrite(
		device=None,
		microclimate=None,
		plan_parameters=PlanParametersSchema(
			temperature_sked="8AM-8PM",
			lights_off_time=time(22, 0),
		),
	)


@pytest.fixture
def update_payload() -> PlanPatternWrite:
	return PlanPatternWrite(
		device="terrarium-controller-01",
		microclimate=MicroclimateSchema(
			temperature="21C",
			ventilation="medium",
			light_level=5,
			humidity=HumiditySchema(relative_humidity=45, absolute_humidity=10),
		),
		plan_parameters=PlanParametersSchema(
			temperature_sked="8AM-8PM",
			lights_off_time=time(22, 0),
		),
	)


@pytest.fixture
async def client(fake_db_session: FakeAsyncSession) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and DB dependency mocked."""

	async def override_get_db() -> AsyncGenerator[Any, None]:
		yield fake_db_session

	app.dependency_overrides[get_db] = override_get_db
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
