"""Turn-resolution core for a turn-based grid game.

Units are prepared (sense + capture one action) and then performed
(effects tick + action) in two-phase rounds.
"""

from warrior_core.config import EngineConfig
from warrior_core.core import (
    Ability,
    AbilityKind,
    ActionAbility,
    CapturedAction,
    Effect,
    RoundSnapshot,
    SenseAbility,
    TimedEffect,
    Turn,
    Unit,
    UnitSchema,
    UnknownAbilityError,
)
from warrior_core.engine import RoundLoop

__all__ = [
    "Ability",
    "AbilityKind",
    "ActionAbility",
    "CapturedAction",
    "Effect",
    "EngineConfig",
    "RoundLoop",
    "RoundSnapshot",
    "SenseAbility",
    "TimedEffect",
    "Turn",
    "Unit",
    "UnitSchema",
    "UnknownAbilityError",
]
