from __future__ import annotations

from datetime import time
from types import SimpleNamespace

import pytest

from hygimeter.exceptions import InvalidDataError, StatusCode
from hygimeter.models.enums import OperationKind
from hygimeter.schemas.microclimate import MicroclimateSchema
from hygimeter.schemas.plan_pattern import PlanParametersSchema, PlanPatternWrite
from hygimeter.services.plan_pattern_validation import validate_plan_pattern


def _with_microclimate(payload: PlanPatternWrite, **changes: object) -> PlanPatternWrite:
	microclimate = payload.microclimate.model_copy(update=changes)
	return payload.model_copy(update={"microclimate": microclimate})


def _with_humidity(payload: PlanPatternWrite, **changes: object) -> PlanPatternWrite:
	humidity = payload.microclimate.humidity.model_copy(update=changes)
	return _with_microclimate(payload, humidity=humidity)


def _with_params(payload: PlanPatternWrite, **changes: object) -> PlanPatternWrite:
	params = payload.plan_parameters.model_copy(update=changes)
	return payload.model_copy(update={"plan_parameters": params})


# ── create rules ────────────────────────────────────────────────────────────


def test_create_accepts_minimal_payload(create_payload: PlanPatternWrite) -> None:
	validate_plan_pattern(create_payload, OperationKind.create)


@pytest.mark.parametrize(
	("changes", "message"),
	[
		({"device": "controller-7"}, "Device must be null at fulling the form"),
		(
			{"microclimate": MicroclimateSchema(temperature="20C")},
			"Microclimate should be null while 1st time creating",
		),
		({"plan_parameters": None}, "Plan parameters cannot be null"),
	],
)
def test_create_rejects(
	create_payload: PlanPatternWrite,
	changes: dict[str, object],
	message: str,
) -> None:
	payload = create_payload.model_copy(update=changes)

	with pytest.raises(InvalidDataError) as excinfo:
		validate_plan_pattern(payload, OperationKind.create)

	assert excinfo.value.message == message
	assert excinfo.value.code == StatusCode.INVALID_DATA


def test_create_checks_device_before_microclimate(create_payload: PlanPatternWrite) -> None:
	payload = create_payload.model_copy(
		update={"device": "controller-7", "microclimate": MicroclimateSchema()}
	)

	with pytest.raises(InvalidDataError, match="Device must be null"):
		validate_plan_pattern(payload, OperationKind.create)


def test_create_rules_ignore_update_only_fields(create_payload: PlanPatternWrite) -> None:
	payload = _with_params(create_payload, temperature_sked="", lights_off_time=None)

	validate_plan_pattern(payload, OperationKind.create)


# ── update rules ────────────────────────────────────────────────────────────


def test_update_accepts_full_payload(update_payload: PlanPatternWrite) -> None:
	validate_plan_pattern(update_payload, OperationKind.update)


def test_update_rules_apply_to_create_shaped_payload(create_payload: PlanPatternWrite) -> None:
	with pytest.raises(InvalidDataError, match="Microclimate cannot be null"):
		validate_plan_pattern(create_payload, OperationKind.update)


def test_update_requires_plan_parameters(update_payload: PlanPatternWrite) -> None:
	payload = update_payload.model_copy(update={"plan_parameters": None})

	with pytest.raises(InvalidDataError, match="Plan parameters cannot be null"):
		validate_plan_pattern(payload, OperationKind.update)


def test_update_temperature_length_boundary(update_payload: PlanPatternWrite) -> None:
	validate_plan_pattern(_with_microclimate(update_payload, temperature="x" * 20), OperationKind.update)

	with pytest.raises(InvalidDataError, match="Max size of temperature is 20 characters"):
		validate_plan_pattern(
			_with_microclimate(update_payload, temperature="x" * 21),
			OperationKind.update,
		)


def test_update_ventilation_length_boundary(update_payload: PlanPatternWrite) -> None:
	validate_plan_pattern(_with_microclimate(update_payload, ventilation="v" * 100), OperationKind.update)

	with pytest.raises(InvalidDataError, match="Max size of ventilation is 100 characters"):
		validate_plan_pattern(
			_with_microclimate(update_payload, ventilation="v" * 101),
			OperationKind.update,
		)


@pytest.mark.parametrize("light_level", [0, -3, None])
def test_update_rejects_non_positive_light_level(
	update_payload: PlanPatternWrite,
	light_level: int | None,
) -> None:
	with pytest.raises(InvalidDataError) as excinfo:
		validate_plan_pattern(
			_with_microclimate(update_payload, light_level=light_level),
			OperationKind.update,
		)

	assert excinfo.value.message == "Light level must be greater than 0"


@pytest.mark.parametrize(
	("changes", "message"),
	[
		(
			{"relative_humidity": None},
			"Relative humidity must be not null and greater than 0 on updating parameters",
		),
		(
			{"relative_humidity": 0},
			"Relative humidity must be not null and greater than 0 on updating parameters",
		),
		(
			{"absolute_humidity": None},
			"Absolute humidity must be not null and greater than 0 on updating parameters",
		),
		(
			{"absolute_humidity": -1.5},
			"Absolute humidity must be not null and greater than 0 on updating parameters",
		),
	],
)
def test_update_rejects_missing_or_non_positive_humidity(
	update_payload: PlanPatternWrite,
	changes: dict[str, object],
	message: str,
) -> None:
	with pytest.raises(InvalidDataError) as excinfo:
		validate_plan_pattern(_with_humidity(update_payload, **changes), OperationKind.update)

	assert excinfo.value.message == message


def test_update_rejects_missing_humidity_block(update_payload: PlanPatternWrite) -> None:
	with pytest.raises(InvalidDataError, match="Relative humidity"):
		validate_plan_pattern(_with_microclimate(update_payload, humidity=None), OperationKind.update)


@pytest.mark.parametrize("sked", [None, ""])
def test_update_requires_temperature_schedule(
	update_payload: PlanPatternWrite,
	sked: str | None,
) -> None:
	with pytest.raises(InvalidDataError, match="Temperature schedule must be not null and not empty"):
		validate_plan_pattern(_with_params(update_payload, temperature_sked=sked), OperationKind.update)


def test_update_temperature_schedule_length_boundary(update_payload: PlanPatternWrite) -> None:
	validate_plan_pattern(_with_params(update_payload, temperature_sked="s" * 100), OperationKind.update)

	with pytest.raises(InvalidDataError, match="Max size of temperature schedule is 100 characters"):
		validate_plan_pattern(
			_with_params(update_payload, temperature_sked="s" * 101),
			OperationKind.update,
		)


@pytest.mark.parametrize("hour", [0, 23])
def test_update_lights_off_hour_boundaries(update_payload: PlanPatternWrite, hour: int) -> None:
	validate_plan_pattern(
		_with_params(update_payload, lights_off_time=time(hour, 30)),
		OperationKind.update,
	)


def test_update_requires_lights_off_time(update_payload: PlanPatternWrite) -> None:
	with pytest.raises(InvalidDataError, match="Time when lights go off"):
		validate_plan_pattern(_with_params(update_payload, lights_off_time=None), OperationKind.update)


def test_update_rejects_out_of_range_lights_off_hour(update_payload: PlanPatternWrite) -> None:
	# datetime.time cannot hold hour 24; build the value without validation
	params = PlanParametersSchema.model_construct(
		temperature_sked="8AM-8PM",
		lights_off_time=SimpleNamespace(hour=24),
	)
	payload = update_payload.model_copy(update={"plan_parameters": params})

	with pytest.raises(InvalidDataError, match="Time when lights go off"):
		validate_plan_pattern(payload, OperationKind.update)


def test_update_reports_first_failing_rule(update_payload: PlanPatternWrite) -> None:
	payload = _with_microclimate(update_payload, temperature="t" * 25, light_level=0)

	with pytest.raises(InvalidDataError, match="temperature is 20 characters"):
		validate_plan_pattern(payload, OperationKind.update)


def test_invalid_data_error_is_value_error() -> None:
	error = InvalidDataError("bad")
	assert isinstance(error, ValueError)
	assert error.to_detail() == {"error": "INVALID_DATA", "message": "bad"}

