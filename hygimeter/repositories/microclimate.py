"""Persistence access for microclimates."""

from __future__ import annotations

from hygimeter.models.microclimate import Microclimate
from hygimeter.repositories.base import BaseRepository


class MicroclimateRepository(BaseRepository[Microclimate]):
	model = Microclimate
