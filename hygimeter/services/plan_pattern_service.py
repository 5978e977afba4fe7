"""Plan pattern create / update / delete / read workflow."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from hygimeter.exceptions import EntityNotFoundError, InvalidDataError
from hygimeter.models.enums import OperationKind
from hygimeter.models.plan_pattern import PlanPattern
from hygimeter.repositories.plan_pattern import PlanPatternRepository
from hygimeter.schemas.plan_pattern import PlanPatternRead, PlanPatternWrite
from hygimeter.services.plan_pattern_mapper import PlanPatternMapper
from hygimeter.services.plan_pattern_validation import validate_plan_pattern

logger = structlog.get_logger("hygimeter.plan_pattern")


class PlanPatternService:
	"""Validates payloads, merges updates and delegates persistence.

	All validation happens before the first repository write, so a rejected
	payload never leaves partial state behind.
	"""

	def __init__(
		self,
		db: AsyncSession,
		repository: PlanPatternRepository | None = None,
		mapper: type[PlanPatternMapper] = PlanPatternMapper,
	):
		self.db = db
		self.repository = repository or PlanPatternRepository(db)
		self.mapper = mapper

	async def create(self, payload: PlanPatternWrite) -> PlanPatternRead:
		self._validate(payload, OperationKind.create)
		plan_pattern = self.mapper.to_entity(payload)
		saved = await self.repository.save(plan_pattern)
		logger.info("plan_pattern_created", plan_pattern_id=saved.id)
		return self.mapper.to_read(saved)

	async def update(self, plan_pattern_id: int, payload: PlanPatternWrite) -> PlanPatternRead:
		plan_pattern = await self._require(plan_pattern_id)
		self._validate(payload, OperationKind.update, plan_pattern_id=plan_pattern_id)

		# id and the microclimate reference stay as stored
		plan_pattern.microclimate_plans = self.mapper.to_microclimate_plans(payload)
		plan_pattern.device = payload.device
		plan_pattern.plan_parameters = self.mapper.to_plan_parameters(payload)

		saved = await self.repository.save(plan_pattern)
		logger.info("plan_pattern_updated", plan_pattern_id=saved.id, device=saved.device)
		return self.mapper.to_read(saved)

	async def delete(self, plan_pattern_id: int) -> None:
		plan_pattern = await self._require(plan_pattern_id)
		await self.repository.delete_by_id(plan_pattern.id)
		logger.info("plan_pattern_deleted", plan_pattern_id=plan_pattern_id)

	async def get_by_id(self, plan_pattern_id: int) -> PlanPatternRead:
		plan_pattern = await self._require(plan_pattern_id)
		return self.mapper.to_read(plan_pattern)

	async def get_all(self) -> list[PlanPatternRead]:
		plan_patterns = await self.repository.find_all()
		return self.mapper.to_read_list(plan_patterns)

	async def _require(self, plan_pattern_id: int) -> PlanPattern:
		plan_pattern = await self.repository.find_by_id(plan_pattern_id)
		if plan_pattern is None:
			raise EntityNotFoundError(f"Plan pattern {plan_pattern_id} not found")
		return plan_pattern

	@staticmethod
	def _validate(
		payload: PlanPatternWrite,
		kind: OperationKind,
		plan_pattern_id: int | None = None,
	) -> None:
		try:
			validate_plan_pattern(payload, kind)
		except InvalidDataError as exc:
			logger.warning(
				"plan_pattern_rejected",
				operation=kind.value,
				plan_pattern_id=plan_pattern_id,
				reason=exc.message,
			)
			raise
