"""Status effect system — stateful modifiers attached to a unit.

Design:
  - An effect is any object exposing ``trigger()`` and ``pass_turn()``.
  - Effects live in the owning unit's insertion-ordered mapping and are
    never shared between units.
  - ``pass_turn()`` is called exactly once per performed turn of a living
    unit, before the unit's captured action, in insertion order.
  - ``trigger()`` may be called by any ability at any time.
  - ``TimedEffect`` covers the common countdown case; effect-specific
    behaviour is supplied through its callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Effect(Protocol):
    """Structural interface every effect satisfies."""

    def trigger(self) -> None: ...

    def pass_turn(self) -> None: ...


@dataclass(slots=True)
class TimedEffect:
    """A countdown effect.

    ``remaining_turns`` of -1 means permanent until explicitly removed;
    a positive value counts down once per ``pass_turn``. ``on_expire`` fires
    exactly once, on the turn the countdown reaches 0.
    """

    remaining_turns: int                     # -1 = permanent, >0 = timed
    source: str = ""                         # Human-readable origin, e.g. "ticking_bomb"
    on_trigger: Callable[[], None] | None = None
    on_expire: Callable[[], None] | None = None
    triggered: int = 0                       # Times trigger() was called

    @property
    def expired(self) -> bool:
        return self.remaining_turns == 0

    @property
    def permanent(self) -> bool:
        return self.remaining_turns < 0

    def trigger(self) -> None:
        self.triggered += 1
        if self.on_trigger is not None:
            self.on_trigger()

    def pass_turn(self) -> None:
        """Decrement remaining duration.  Does nothing if permanent or already expired."""
        if self.remaining_turns > 0:
            self.remaining_turns -= 1
            if self.remaining_turns == 0 and self.on_expire is not None:
                self.on_expire()
