"""ORM model registry: importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.  Application code can also do::

    from hygimeter.models import PlanPattern, Microclimate, ...
"""

# ── Base & Mixins ───────────────────────────────────────────────────────────
from hygimeter.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin

# ── Enums ───────────────────────────────────────────────────────────────────
from hygimeter.models.enums import OperationKind

# ── Reference data ──────────────────────────────────────────────────────────
from hygimeter.models.microclimate import Humidity, Microclimate

# ── Plan patterns ───────────────────────────────────────────────────────────
from hygimeter.models.plan_pattern import (
    MicroclimatePlan,
    PlanParameters,
    PlanPattern,
)

__all__ = [
    # Base & mixins
    "Base",
    "Humidity",
    "IntegerPrimaryKeyMixin",
    # Reference data
    "Microclimate",
    "MicroclimatePlan",
    # Enums
    "OperationKind",
    "PlanParameters",
    # Plan patterns
    "PlanPattern",
    "TimestampMixin",
]
