"""PlanPattern, PlanParameters, MicroclimatePlan ORM models.

Ownership is expressed through relationship cascades:

* ``plan_parameters``: exclusively owned one-to-one.  Deleted with the
  plan pattern and when replaced by an update (``delete-orphan``).
* ``microclimate_plans``: owned ordered collection, replaced wholesale on
  update.
* ``microclimate``: shared reference, never cascaded.
"""

from __future__ import annotations

from datetime import datetime, time

from sqlalchemy import DateTime, ForeignKey, Index, String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hygimeter.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from hygimeter.models.microclimate import Microclimate

# ═══════════════════════════════════════════════════════════════════════════
# PlanParameters
# ═══════════════════════════════════════════════════════════════════════════


class PlanParameters(Base, IntegerPrimaryKeyMixin):
    """Temperature schedule and lights-off time of a plan pattern."""

    __tablename__ = "plan_parameters"

    temperature_sked: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    lights_off_time: Mapped[time | None] = mapped_column(Time, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<PlanParameters id={self.id} sked={self.temperature_sked!r} "
            f"lights_off={self.lights_off_time}>"
        )


# ═══════════════════════════════════════════════════════════════════════════
# PlanPattern
# ═══════════════════════════════════════════════════════════════════════════


class PlanPattern(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """A saved configuration for one controlled device."""

    __tablename__ = "plan_patterns"

    microclimate_id: Mapped[int | None] = mapped_column(
        "optimal_microclimate_id",
        ForeignKey("microclimates.id", ondelete="SET NULL"),
        nullable=True,
    )
    device: Mapped[str | None] = mapped_column(String(255), nullable=True)
    plan_parameters_id: Mapped[int | None] = mapped_column(
        ForeignKey("plan_parameters.id"),
        nullable=True,
        unique=True,
    )

    # ── Relationships ────────────────────────────────────────────────────
    microclimate: Mapped[Microclimate | None] = relationship(lazy="selectin")
    plan_parameters: Mapped[PlanParameters | None] = relationship(
        cascade="all, delete-orphan",
        single_parent=True,
        lazy="selectin",
    )
    microclimate_plans: Mapped[list[MicroclimatePlan]] = relationship(
        back_populates="plan_pattern",
        cascade="all, delete-orphan",
        order_by="MicroclimatePlan.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return (
            f"<PlanPattern id={self.id} device={self.device!r} "
            f"microclimate={self.microclimate_id}>"
        )


# ═══════════════════════════════════════════════════════════════════════════
# MicroclimatePlan
# ═══════════════════════════════════════════════════════════════════════════


class MicroclimatePlan(Base, IntegerPrimaryKeyMixin):
    """One scheduled microclimate entry inside a plan pattern."""

    __tablename__ = "microclimate_plans"
    __table_args__ = (
        Index("ix_microclimate_plans_plan_pattern_id", "plan_pattern_id"),
    )

    plan_pattern_id: Mapped[int] = mapped_column(
        ForeignKey("plan_patterns.id", ondelete="CASCADE"),
        nullable=False,
    )
    microclimate_id: Mapped[int | None] = mapped_column(
        ForeignKey("microclimates.id", ondelete="SET NULL"),
        nullable=True,
    )
    starts_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    ends_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    note: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # ── Relationships ────────────────────────────────────────────────────
    plan_pattern: Mapped[PlanPattern] = relationship(
        back_populates="microclimate_plans"
    )

    def __repr__(self) -> str:
        return (
            f"<MicroclimatePlan id={self.id} plan_pattern={self.plan_pattern_id} "
            f"microclimate={self.microclimate_id}>"
        )
