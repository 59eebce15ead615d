"""Core entities: units, turns, abilities, effects and their records."""

from warrior_core.core.enums import AbilityKind
from warrior_core.core.abilities import Ability, ActionAbility, SenseAbility
from warrior_core.core.effects import Effect, TimedEffect
from warrior_core.core.turn import CapturedAction, Turn, UnknownAbilityError
from warrior_core.core.unit import Unit
from warrior_core.core.schemas import UnitSchema
from warrior_core.core.snapshot import RoundSnapshot

__all__ = [
    "Ability",
    "AbilityKind",
    "ActionAbility",
    "CapturedAction",
    "Effect",
    "RoundSnapshot",
    "SenseAbility",
    "TimedEffect",
    "Turn",
    "Unit",
    "UnitSchema",
    "UnknownAbilityError",
]
