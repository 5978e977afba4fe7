"""Persistence access for plan patterns."""

from __future__ import annotations

from hygimeter.models.plan_pattern import PlanPattern
from hygimeter.repositories.base import BaseRepository


class PlanPatternRepository(BaseRepository[PlanPattern]):
	model = PlanPattern
