"""Microclimate registry: the reference records plan patterns point at."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from hygimeter.exceptions import EntityNotFoundError
from hygimeter.models.microclimate import Humidity, Microclimate
from hygimeter.repositories.microclimate import MicroclimateRepository
from hygimeter.schemas.microclimate import MicroclimateCreate, MicroclimateRead
from hygimeter.services.plan_pattern_mapper import PlanPatternMapper


class MicroclimateService:
	def __init__(self, db: AsyncSession, repository: MicroclimateRepository | None = None):
		self.db = db
		self.repository = repository or MicroclimateRepository(db)

	async def create(self, payload: MicroclimateCreate) -> MicroclimateRead:
		microclimate = Microclimate(
			temperature=payload.temperature,
			ventilation=payload.ventilation,
			light_level=payload.light_level,
			humidity=Humidity(
				relative_humidity=payload.humidity.relative_humidity,
				absolute_humidity=payload.humidity.absolute_humidity,
			),
		)
		saved = await self.repository.save(microclimate)
		return PlanPatternMapper.to_microclimate_read(saved)

	async def get_by_id(self, microclimate_id: int) -> MicroclimateRead:
		microclimate = await self.repository.find_by_id(microclimate_id)
		if microclimate is None:
			raise EntityNotFoundError(f"Microclimate {microclimate_id} not found")
		return PlanPatternMapper.to_microclimate_read(microclimate)

	async def get_all(self) -> list[MicroclimateRead]:
		microclimates = await self.repository.find_all()
		return [PlanPatternMapper.to_microclimate_read(item) for item in microclimates]
