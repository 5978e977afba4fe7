"""Plan pattern CRUD routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hygimeter.database import get_db
from hygimeter.exceptions import HygimeterError
from hygimeter.schemas.plan_pattern import (
	PlanPatternListRead,
	PlanPatternRead,
	PlanPatternWrite,
)
from hygimeter.services.plan_pattern_service import PlanPatternService

router = APIRouter(prefix="/plan-patterns", tags=["plan-patterns"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, HygimeterError):
		code = (
			status.HTTP_404_NOT_FOUND
			if isinstance(exc, LookupError)
			else status.HTTP_400_BAD_REQUEST
		)
		return HTTPException(status_code=code, detail=exc.to_detail())
	return HTTPException(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail="Unexpected plan pattern service failure",
	)


@router.post("", response_model=PlanPatternRead, status_code=status.HTTP_201_CREATED)
async def create_plan_pattern(
	payload: PlanPatternWrite,
	db: AsyncSession = Depends(get_db),
) -> PlanPatternRead:
	service = PlanPatternService(db)
	try:
		return await service.create(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("", response_model=PlanPatternListRead)
async def list_plan_patterns(db: AsyncSession = Depends(get_db)) -> PlanPatternListRead:
	service = PlanPatternService(db)
	try:
		items = await service.get_all()
	except Exception as exc:
		raise _map_error(exc) from exc
	return PlanPatternListRead(items=items)


@router.get("/{plan_pattern_id}", response_model=PlanPatternRead)
async def get_plan_pattern(
	plan_pattern_id: int,
	db: AsyncSession = Depends(get_db),
) -> PlanPatternRead:
	service = PlanPatternService(db)
	try:
		return await service.get_by_id(plan_pattern_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.put("/{plan_pattern_id}", response_model=PlanPatternRead)
async def update_plan_pattern(
	plan_pattern_id: int,
	payload: PlanPatternWrite,
	db: AsyncSession = Depends(get_db),
) -> PlanPatternRead:
	service = PlanPatternService(db)
	try:
		return await service.update(plan_pattern_id, payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.delete("/{plan_pattern_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan_pattern(
	plan_pattern_id: int,
	db: AsyncSession = Depends(get_db),
) -> Response:
	service = PlanPatternService(db)
	try:
		await service.delete(plan_pattern_id)
	except Exception as exc:
		raise _map_error(exc) from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
