"""Enum types shared by the service layer.

These are separate from the settings enums in hygimeter/config.py;
config enums validate settings, these select domain behaviour.
"""

from enum import StrEnum


class OperationKind(StrEnum):
    """Which rule set a plan pattern payload is validated against."""

    create = "create"
    update = "update"
