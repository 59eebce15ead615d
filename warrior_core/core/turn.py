"""Turn — the per-round object a control hook plays against.

A Turn is built from a read-only view of the unit's abilities when the
round starts. Sense abilities run immediately and return their value to
the caller. Action abilities are not run: the first one called is captured
as a ``CapturedAction`` and replayed by ``Unit.perform_turn`` after every
unit in the round has been prepared.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, NamedTuple

from warrior_core.core.abilities import is_action, is_sense
from warrior_core.core.enums import AbilityKind

if TYPE_CHECKING:
    from warrior_core.core.abilities import Ability

logger = logging.getLogger(__name__)


class UnknownAbilityError(LookupError):
    """Raised when an ability name is not registered on the unit."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        hint = f" (available: {', '.join(available)})" if available else ""
        super().__init__(f"Unknown ability {name!r}{hint}")


class CapturedAction(NamedTuple):
    """An action ability invocation recorded for deferred execution."""

    name: str
    args: tuple[Any, ...] = ()

    def __repr__(self) -> str:
        return f"Action({self.name}, args={self.args})"


class Turn:
    """Mediates sense calls and captures at most one action.

    Double commits are resolved first-wins: once an action is captured,
    further ``commit_action`` calls are ignored and return False.
    """

    __slots__ = ("_abilities", "_action")

    def __init__(self, abilities: Mapping[str, Ability]) -> None:
        self._abilities: Mapping[str, Ability] = MappingProxyType(dict(abilities))
        self._action: CapturedAction | None = None

    # -- registry view --

    @property
    def abilities(self) -> Mapping[str, Ability]:
        return self._abilities

    @property
    def ability_names(self) -> tuple[str, ...]:
        return tuple(self._abilities)

    def _lookup(self, name: str, kind: AbilityKind) -> Ability:
        ability = self._abilities.get(name)
        if ability is None:
            raise UnknownAbilityError(name, self.ability_names)
        if ability.kind != kind:
            raise TypeError(
                f"Ability {name!r} is a {ability.kind.name.lower()} ability, "
                f"not a {kind.name.lower()} ability"
            )
        return ability

    # -- sense phase --

    def sense(self, name: str, *args: Any) -> Any:
        """Perform the sense ability *name* right away and return its result."""
        return self._lookup(name, AbilityKind.SENSE).perform(*args)

    # -- action capture --

    def commit_action(self, name: str, *args: Any) -> bool:
        """Capture the action ability *name* with *args* for later performance.

        Returns True if the action was captured, False if another action was
        already committed this turn.
        """
        self._lookup(name, AbilityKind.ACTION)
        if self._action is not None:
            logger.warning(
                "Action %s%r ignored — %s already committed this turn",
                name, args, self._action.name,
            )
            return False
        self._action = CapturedAction(name, tuple(args))
        return True

    @property
    def action(self) -> CapturedAction | None:
        return self._action

    @property
    def has_action(self) -> bool:
        return self._action is not None

    # -- per-ability callables --

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for names that are not slots, methods or properties.
        try:
            ability = object.__getattribute__(self, "_abilities")[name]
        except (AttributeError, KeyError):
            raise AttributeError(
                f"{type(self).__name__!r} has no ability {name!r}"
            ) from None
        if is_action(ability):
            return lambda *args: self.commit_action(name, *args)
        if is_sense(ability):
            return lambda *args: self.sense(name, *args)
        raise TypeError(f"Ability {name!r} has unsupported kind {ability.kind!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._abilities))

    def __repr__(self) -> str:
        return f"Turn(abilities={list(self._abilities)}, action={self._action!r})"
