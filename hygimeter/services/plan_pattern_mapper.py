"""Conversion between plan pattern schemas and ORM entities."""

from __future__ import annotations

from collections.abc import Iterable

from hygimeter.models.microclimate import Humidity, Microclimate
from hygimeter.models.plan_pattern import MicroclimatePlan, PlanParameters, PlanPattern
from hygimeter.schemas.microclimate import (
	HumiditySchema,
	MicroclimateRead,
	MicroclimateSchema,
)
from hygimeter.schemas.plan_pattern import (
	MicroclimatePlanRead,
	PlanParametersRead,
	PlanPatternRead,
	PlanPatternWrite,
)


class PlanPatternMapper:
	"""Stateless field-by-field mapping; no I/O."""

	# ── write payload → entity ──────────────────────────────────────────

	@classmethod
	def to_entity(cls, payload: PlanPatternWrite) -> PlanPattern:
		return PlanPattern(
			device=payload.device,
			microclimate=cls.to_microclimate(payload.microclimate),
			plan_parameters=cls.to_plan_parameters(payload),
			microclimate_plans=cls.to_microclimate_plans(payload),
		)

	@staticmethod
	def to_plan_parameters(payload: PlanPatternWrite) -> PlanParameters | None:
		params = payload.plan_parameters
		if params is None:
			return None
		return PlanParameters(
			temperature_sked=params.temperature_sked,
			lights_off_time=params.lights_off_time,
		)

	@staticmethod
	def to_microclimate_plans(payload: PlanPatternWrite) -> list[MicroclimatePlan]:
		return [
			MicroclimatePlan(
				microclimate_id=plan.microclimate_id,
				starts_at=plan.starts_at,
				ends_at=plan.ends_at,
				note=plan.note,
			)
			for plan in payload.microclimate_plans
		]

	@staticmethod
	def to_microclimate(schema: MicroclimateSchema | None) -> Microclimate | None:
		if schema is None:
			return None
		humidity = schema.humidity or HumiditySchema()
		return Microclimate(
			temperature=schema.temperature,
			ventilation=schema.ventilation,
			light_level=schema.light_level,
			humidity=Humidity(
				relative_humidity=humidity.relative_humidity,
				absolute_humidity=humidity.absolute_humidity,
			),
		)

	# ── entity → read schema ────────────────────────────────────────────

	@classmethod
	def to_read(cls, entity: PlanPattern) -> PlanPatternRead:
		params = entity.plan_parameters
		return PlanPatternRead(
			id=entity.id,
			device=entity.device,
			microclimate=(
				cls.to_microclimate_read(entity.microclimate)
				if entity.microclimate is not None
				else None
			),
			plan_parameters=(
				PlanParametersRead(
					id=params.id,
					temperature_sked=params.temperature_sked,
					lights_off_time=params.lights_off_time,
				)
				if params is not None
				else None
			),
			microclimate_plans=[
				MicroclimatePlanRead(
					id=plan.id,
					microclimate_id=plan.microclimate_id,
					starts_at=plan.starts_at,
					ends_at=plan.ends_at,
					note=plan.note,
				)
				for plan in entity.microclimate_plans or []
			],
			created_at=entity.created_at,
			updated_at=entity.updated_at,
		)

	@classmethod
	def to_read_list(cls, entities: Iterable[PlanPattern]) -> list[PlanPatternRead]:
		return [cls.to_read(entity) for entity in entities]

	@staticmethod
	def to_microclimate_read(entity: Microclimate) -> MicroclimateRead:
		# both humidity columns NULL
		humidity = entity.humidity or Humidity()
		return MicroclimateRead(
			id=entity.id,
			temperature=entity.temperature,
			ventilation=entity.ventilation,
			light_level=entity.light_level,
			humidity=HumiditySchema(
				relative_humidity=humidity.relative_humidity,
				absolute_humidity=humidity.absolute_humidity,
			),
			created_at=entity.created_at,
			updated_at=entity.updated_at,
		)
