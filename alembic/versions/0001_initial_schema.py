"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the four plan pattern tables.  ``plan_patterns`` references its
owned ``plan_parameters`` row and the shared ``microclimates`` row; owned
``microclimate_plans`` rows reference their plan pattern.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # ── microclimates ────────────────────────────────────────────────────
    op.create_table(
        "microclimates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("temperature", sa.String(length=20), nullable=True),
        sa.Column("ventilation", sa.String(length=100), nullable=True),
        sa.Column("light_level", sa.Integer(), nullable=True),
        sa.Column("relative_humidity", sa.Float(), nullable=True),
        sa.Column("absolute_humidity", sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ── plan_parameters ──────────────────────────────────────────────────
    op.create_table(
        "plan_parameters",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("temperature_sked", sa.String(length=100), nullable=True),
        sa.Column("lights_off_time", sa.Time(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # ── plan_patterns ────────────────────────────────────────────────────
    op.create_table(
        "plan_patterns",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("optimal_microclimate_id", sa.Integer(), nullable=True),
        sa.Column("device", sa.String(length=255), nullable=True),
        sa.Column("plan_parameters_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["optimal_microclimate_id"], ["microclimates.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["plan_parameters_id"], ["plan_parameters.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plan_parameters_id"),
    )

    # ── microclimate_plans ───────────────────────────────────────────────
    op.create_table(
        "microclimate_plans",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("plan_pattern_id", sa.Integer(), nullable=False),
        sa.Column("microclimate_id", sa.Integer(), nullable=True),
        sa.Column("starts_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ends_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("note", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(
            ["plan_pattern_id"], ["plan_patterns.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["microclimate_id"], ["microclimates.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_microclimate_plans_plan_pattern_id",
        "microclimate_plans",
        ["plan_pattern_id"],
    )


def downgrade() -> None:
    op.drop_index(
        "ix_microclimate_plans_plan_pattern_id", table_name="microclimate_plans"
    )
    op.drop_table("microclimate_plans")
    op.drop_table("plan_patterns")
    op.drop_table("plan_parameters")
    op.drop_table("microclimates")
