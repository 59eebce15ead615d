"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class AbilityKind(IntEnum):
    """Capability of an ability within a turn."""

    SENSE = 0     # Read-only, executed immediately while preparing
    ACTION = 1    # World-mutating, captured and performed later
