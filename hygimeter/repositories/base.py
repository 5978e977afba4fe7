"""Generic async repository over a request-scoped ``AsyncSession``.

Subclasses set ``model``; relationship loading is declared on the models
(``lazy="selectin"``) so every query returns fully loaded entities that are
safe to serialise outside the session's greenlet.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from hygimeter.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
	"""Identifier-keyed CRUD: save, find_by_id, find_all, delete_by_id."""

	model: type[ModelT]

	def __init__(self, db: AsyncSession):
		self.db = db

	def _select(self) -> Select[Any]:
		return select(self.model)

	async def save(self, entity: ModelT) -> ModelT:
		"""Insert or update ``entity`` and return it with store-assigned values."""
		self.db.add(entity)
		await self.db.flush()
		await self.db.refresh(entity)
		return entity

	async def find_by_id(self, entity_id: int) -> ModelT | None:
		stmt = self._select().where(self.model.id == entity_id)
		row = await self.db.execute(stmt)
		return row.scalar_one_or_none()

	async def find_all(self) -> list[ModelT]:
		rows = await self.db.execute(self._select().order_by(self.model.id.asc()))
		return list(rows.scalars().all())

	async def delete_by_id(self, entity_id: int) -> None:
		"""ORM delete so relationship cascades run; missing ids are a no-op."""
		entity = await self.find_by_id(entity_id)
		if entity is None:
			return
		await self.db.delete(entity)
		await self.db.flush()
