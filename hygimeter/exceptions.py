"""Service-level error taxonomy.

Both concrete errors also derive from the builtin exception the HTTP layer
maps (``LookupError`` → 404, ``ValueError`` → 400), so callers that only
know the builtins keep working.
"""

from __future__ import annotations

from enum import StrEnum


class StatusCode(StrEnum):
	ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
	INVALID_DATA = "INVALID_DATA"


class HygimeterError(Exception):
	"""Base error carrying a machine-readable code and a human message."""

	code: StatusCode

	def __init__(self, message: str, code: StatusCode | None = None) -> None:
		super().__init__(message)
		self.message = message
		if code is not None:
			self.code = code

	def to_detail(self) -> dict[str, str]:
		return {"error": self.code.name, "message": self.message}


class EntityNotFoundError(HygimeterError, LookupError):
	code = StatusCode.ENTITY_NOT_FOUND


class InvalidDataError(HygimeterError, ValueError):
	code = StatusCode.INVALID_DATA
