"""Microclimate registry routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from hygimeter.database import get_db
from hygimeter.exceptions import HygimeterError
from hygimeter.schemas.microclimate import (
	MicroclimateCreate,
	MicroclimateListRead,
	MicroclimateRead,
)
from hygimeter.services.microclimate_service import MicroclimateService

router = APIRouter(prefix="/microclimates", tags=["microclimates"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, HygimeterError) and isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.to_detail())
	return HTTPException(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail="Unexpected microclimate service failure",
	)


@router.post("", response_model=MicroclimateRead, status_code=status.HTTP_201_CREATED)
async def create_microclimate(
	payload: MicroclimateCreate,
	db: AsyncSession = Depends(get_db),
) -> MicroclimateRead:
	service = MicroclimateService(db)
	try:
		return await service.create(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("", response_model=MicroclimateListRead)
async def list_microclimates(db: AsyncSession = Depends(get_db)) -> MicroclimateListRead:
	service = MicroclimateService(db)
	try:
		items = await service.get_all()
	except Exception as exc:
		raise _map_error(exc) from exc
	return MicroclimateListRead(items=items)


@router.get("/{microclimate_id}", response_model=MicroclimateRead)
async def get_microclimate(
	microclimate_id: int,
	db: AsyncSession = Depends(get_db),
) -> MicroclimateRead:
	service = MicroclimateService(db)
	try:
		return await service.get_by_id(microclimate_id)
	except Exception as exc:
		raise _map_error(exc) from exc
