"""Create / update rule sets for plan pattern payloads.

Exactly one rule set runs per call, chosen by the caller through
:class:`OperationKind`.  Rules run in a fixed order and the first failing
rule raises :class:`InvalidDataError` with its message.
"""

from __future__ import annotations

from hygimeter.exceptions import InvalidDataError
from hygimeter.models.enums import OperationKind
from hygimeter.schemas.microclimate import HumiditySchema
from hygimeter.schemas.plan_pattern import PlanPatternWrite

MAX_TEMPERATURE_LENGTH = 20
MAX_VENTILATION_LENGTH = 100
MAX_TEMPERATURE_SKED_LENGTH = 100


def validate_plan_pattern(payload: PlanPatternWrite, kind: OperationKind) -> None:
	if kind == OperationKind.create:
		_validate_on_create(payload)
	elif kind == OperationKind.update:
		_validate_on_update(payload)
	else:
		raise ValueError(f"Unsupported operation kind: {kind!r}")


def _validate_on_create(payload: PlanPatternWrite) -> None:
	microclimate = payload.microclimate
	humidity = _humidity_of(payload)

	if payload.device is not None:
		raise InvalidDataError("Device must be null at fulling the form")
	if microclimate is not None:
		raise InvalidDataError("Microclimate should be null while 1st time creating")
	if payload.plan_parameters is None:
		raise InvalidDataError("Plan parameters cannot be null")
	if humidity.relative_humidity is not None:
		raise InvalidDataError("Relative humidity must be null on creating plan parameters")
	if humidity.absolute_humidity is not None:
		raise InvalidDataError("Absolute humidity must be null on creating plan parameters")


def _validate_on_update(payload: PlanPatternWrite) -> None:
	microclimate = payload.microclimate
	params = payload.plan_parameters

	if microclimate is None:
		raise InvalidDataError("Microclimate cannot be null on updating parameters")
	if params is None:
		raise InvalidDataError("Plan parameters cannot be null")

	humidity = _humidity_of(payload)

	if microclimate.temperature is not None and len(microclimate.temperature) > MAX_TEMPERATURE_LENGTH:
		raise InvalidDataError("Max size of temperature is 20 characters")
	if microclimate.ventilation is not None and len(microclimate.ventilation) > MAX_VENTILATION_LENGTH:
		raise InvalidDataError("Max size of ventilation is 100 characters")
	if microclimate.light_level is None or microclimate.light_level <= 0:
		raise InvalidDataError("Light level must be greater than 0")
	if humidity.relative_humidity is None or humidity.relative_humidity <= 0:
		raise InvalidDataError(
			"Relative humidity must be not null and greater than 0 on updating parameters"
		)
	if humidity.absolute_humidity is None or humidity.absolute_humidity <= 0:
		raise InvalidDataError(
			"Absolute humidity must be not null and greater than 0 on updating parameters"
		)
	if not params.temperature_sked:
		raise InvalidDataError(
			"Temperature schedule must be not null and not empty on updating parameters"
		)
	if len(params.temperature_sked) > MAX_TEMPERATURE_SKED_LENGTH:
		raise InvalidDataError("Max size of temperature schedule is 100 characters")
	lights_off = params.lights_off_time
	if lights_off is None or not 0 <= lights_off.hour <= 23:
		raise InvalidDataError("Time when lights go off must be not null on updating parameters")


def _humidity_of(payload: PlanPatternWrite) -> HumiditySchema:
	if payload.microclimate is None or payload.microclimate.humidity is None:
		return HumiditySchema()
	return payload.microclimate.humidity
