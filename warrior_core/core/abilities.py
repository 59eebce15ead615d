"""Abilities — named capabilities a unit can invoke during its turn.

Design:
  - An ability is any object with a ``kind`` tag and a ``perform`` method.
  - SENSE abilities compute and return a value without mutating the world.
    They run immediately, any number of times, while the turn is prepared.
  - ACTION abilities mutate the world. At most one is captured per turn and
    performed later, once every unit has finished sensing.
  - The registry is a plain insertion-ordered ``dict`` owned by the unit.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from warrior_core.core.enums import AbilityKind


@runtime_checkable
class Ability(Protocol):
    """Structural interface every ability satisfies."""

    kind: AbilityKind

    def perform(self, *args: Any) -> Any: ...


class _CallableAbility:
    """Adapts a plain function into a tagged ability."""

    __slots__ = ("_fn", "description")

    kind: AbilityKind

    def __init__(self, fn: Callable[..., Any], description: str = "") -> None:
        self._fn = fn
        self.description = description or (fn.__doc__ or "").strip()

    def perform(self, *args: Any) -> Any:
        return self._fn(*args)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__name__", type(self._fn).__name__)
        return f"{type(self).__name__}({name})"


class SenseAbility(_CallableAbility):
    """Read-only ability; the wrapped function's return value is the sensed result."""

    __slots__ = ()

    kind = AbilityKind.SENSE


class ActionAbility(_CallableAbility):
    """World-mutating ability; the wrapped function's return value is ignored."""

    __slots__ = ()

    kind = AbilityKind.ACTION


def is_action(ability: Ability) -> bool:
    return ability.kind == AbilityKind.ACTION


def is_sense(ability: Ability) -> bool:
    return ability.kind == AbilityKind.SENSE
