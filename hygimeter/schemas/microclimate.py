"""Pydantic request/response schemas for microclimate objects."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HumiditySchema(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	relative_humidity: float | None = None
	absolute_humidity: float | None = None


class MicroclimateSchema(BaseModel):
	"""Microclimate as embedded in a plan pattern payload.

	Deliberately unconstrained: the plan pattern rule sets decide what is
	acceptable depending on whether the payload creates or updates.
	"""

	temperature: str | None = None
	ventilation: str | None = None
	light_level: int | None = None
	humidity: HumiditySchema | None = None


class HumidityCreate(BaseModel):
	relative_humidity: float | None = Field(default=None, gt=0)
	absolute_humidity: float | None = Field(default=None, gt=0)


class MicroclimateCreate(BaseModel):
	temperature: str | None = Field(default=None, max_length=20)
	ventilation: str | None = Field(default=None, max_length=100)
	light_level: int | None = Field(default=None, gt=0)
	humidity: HumidityCreate = Field(default_factory=HumidityCreate)


class MicroclimateRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	temperature: str | None
	ventilation: str | None
	light_level: int | None
	humidity: HumiditySchema
	created_at: datetime
	updated_at: datetime


class MicroclimateListRead(BaseModel):
	items: list[MicroclimateRead]
