"""Microclimate ORM model: target environmental profile.

Microclimates are shared reference data: a plan pattern points at one but
never owns it, so deleting a plan pattern leaves the microclimate in place.
The two humidity readings are stored as plain columns on ``microclimates``
and exposed on the model as a single :class:`Humidity` composite value.
"""

from __future__ import annotations

import dataclasses

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from hygimeter.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin


@dataclasses.dataclass
class Humidity:
    """Embedded humidity value (both readings optional)."""

    relative_humidity: float | None = None
    absolute_humidity: float | None = None


class Microclimate(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """Temperature, ventilation, light and humidity targets."""

    __tablename__ = "microclimates"

    temperature: Mapped[str | None] = mapped_column(String(20), nullable=True)
    ventilation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    light_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    humidity: Mapped[Humidity] = composite(
        mapped_column("relative_humidity", Float, nullable=True),
        mapped_column("absolute_humidity", Float, nullable=True),
    )

    def __repr__(self) -> str:
        return (
            f"<Microclimate id={self.id} temperature={self.temperature!r} "
            f"light_level={self.light_level}>"
        )
