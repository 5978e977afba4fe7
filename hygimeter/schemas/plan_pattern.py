"""Pydantic request/response schemas for plan pattern objects."""

from __future__ import annotations

from datetime import datetime, time

from pydantic import BaseModel, ConfigDict, Field

from hygimeter.schemas.microclimate import MicroclimateRead, MicroclimateSchema


class PlanParametersSchema(BaseModel):
	temperature_sked: str | None = None
	lights_off_time: time | None = None


class MicroclimatePlanSchema(BaseModel):
	microclimate_id: int | None = None
	starts_at: datetime | None = None
	ends_at: datetime | None = None
	note: str | None = Field(default=None, max_length=255)


class PlanPatternWrite(BaseModel):
	"""Body of both create and update requests.

	The identifier is never part of the body: the store assigns it on create
	and the path carries it on update.
	"""

	device: str | None = None
	microclimate: MicroclimateSchema | None = None
	plan_parameters: PlanParametersSchema | None = None
	microclimate_plans: list[MicroclimatePlanSchema] = Field(default_factory=list)


class PlanParametersRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	temperature_sked: str | None
	lights_off_time: time | None


class MicroclimatePlanRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	microclimate_id: int | None
	starts_at: datetime | None
	ends_at: datetime | None
	note: str | None


class PlanPatternRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	device: str | None
	microclimate: MicroclimateRead | None = None
	plan_parameters: PlanParametersRead | None = None
	microclimate_plans: list[MicroclimatePlanRead] = Field(default_factory=list)
	created_at: datetime
	updated_at: datetime


class PlanPatternListRead(BaseModel):
	items: list[PlanPatternRead]
