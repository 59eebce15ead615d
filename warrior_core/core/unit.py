"""Unit — an entity with vitals, abilities and effects, played in rounds.

Each round has two phases, driven by the scheduler:

  1. ``prepare_turn``: a fresh Turn is handed to the unit's control hook.
     Sense abilities run immediately; the first action ability called is
     captured, not performed.
  2. ``perform_turn``: effects tick, then the captured action is performed
     unless the unit is bound.

The scheduler must finish phase 1 for every unit before starting phase 2
for any unit, so that no control hook observes another unit's action from
the same round.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from warrior_core.core.schemas import UnitSchema
from warrior_core.core.turn import Turn, UnknownAbilityError
from warrior_core.utils.event_log import LoggingSink

if TYPE_CHECKING:
    from warrior_core.core.abilities import Ability
    from warrior_core.core.effects import Effect
    from warrior_core.utils.event_log import MessageSink

logger = logging.getLogger(__name__)

Controller = Callable[[Turn], None]


class Unit:
    """A unit on the floor.

    A unit is alive exactly while it has a position. Health reaching 0
    removes the unit from the floor in the same call; the object itself
    stays around for scoring and reporting.
    """

    __slots__ = (
        "name",
        "character",
        "max_health",
        "reward",
        "captive",
        "abilities",
        "effects",
        "health",
        "position",
        "bound",
        "score",
        "turn",
        "controller",
        "sink",
    )

    def __init__(
        self,
        name: str,
        character: str,
        max_health: int,
        reward: int | None = None,
        captive: bool = False,
        *,
        controller: Controller | None = None,
        sink: MessageSink | None = None,
    ) -> None:
        if max_health <= 0:
            raise ValueError(f"max_health must be positive, got {max_health}")
        self.name = name
        self.character = character
        self.max_health = max_health
        self.reward = max_health if reward is None else reward
        self.captive = captive
        self.abilities: dict[str, Ability] = {}
        self.effects: dict[str, Effect] = {}
        self.health = max_health
        self.position: Any = None
        self.bound = captive
        self.score = 0
        self.turn: Turn | None = None
        self.controller = controller
        self.sink: MessageSink = sink if sink is not None else LoggingSink()

    # -- setup --

    def add_ability(self, name: str, ability: Ability) -> None:
        self.abilities[name] = ability

    def add_effect(self, name: str, effect: Effect) -> None:
        self.effects[name] = effect

    def remove_effect(self, name: str) -> None:
        self.effects.pop(name, None)

    def is_under_effect(self, name: str) -> bool:
        return name in self.effects

    def trigger_effect(self, name: str) -> None:
        """Trigger the effect *name*. Does nothing if the unit is not under it."""
        effect = self.effects.get(name)
        if effect is not None:
            effect.trigger()

    # -- turn protocol --

    def get_next_turn(self) -> Turn:
        return Turn(self.abilities)

    def prepare_turn(self) -> None:
        """Play the next turn against the control hook.

        Senses execute immediately; the action is kept on ``self.turn`` for
        ``perform_turn``.
        """
        self.turn = self.get_next_turn()
        self.play_turn(self.turn)

    def play_turn(self, turn: Turn) -> None:
        """Run the control hook. A unit without one idles."""
        if self.controller is not None:
            self.controller(turn)

    def perform_turn(self) -> None:
        """Tick effects, then perform the captured action.

        Precondition: every unit in the round has already been prepared.
        Binding is checked after the effects tick, so an effect that binds
        the unit suppresses this round's action. The turn is discarded
        either way.
        """
        if not self.is_alive():
            return

        # An effect removed by an earlier one in the same tick is skipped.
        for name in list(self.effects):
            effect = self.effects.get(name)
            if effect is not None:
                effect.pass_turn()

        action = self.turn.action if self.turn is not None else None
        self.turn = None
        if action is None or not self.is_alive():
            return
        if self.is_bound():
            logger.debug("%s is bound — %s discarded", self, action.name)
            return

        ability = self.abilities.get(action.name)
        if ability is None:
            raise UnknownAbilityError(action.name, tuple(self.abilities))
        ability.perform(*action.args)

    # -- vitals & combat --

    def is_captive(self) -> bool:
        return self.captive

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"heal amount must be non-negative, got {amount}")
        if not self.is_alive():
            return

        revised_amount = (
            self.max_health - self.health
            if self.health + amount > self.max_health
            else amount
        )
        self.health += revised_amount

        self.say(f"receives {amount} health, up to {self.health} health")

    def take_damage(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"damage amount must be non-negative, got {amount}")
        if not self.is_alive():
            return

        if self.is_bound():
            self.unbind()

        revised_amount = self.health if self.health - amount < 0 else amount
        self.health -= revised_amount

        self.say(f"takes {amount} damage, {self.health} health power left")

        if not self.health:
            self.say("dies")
            self.vanish()

    def damage(self, receiver: Unit, amount: int) -> None:
        """Damage *receiver*; earn its reward if this kills it."""
        was_alive = receiver.is_alive()
        receiver.take_damage(amount)
        if was_alive and not receiver.is_alive():
            self.earn_points(receiver.reward)

    def is_alive(self) -> bool:
        return self.position is not None

    def is_bound(self) -> bool:
        return self.bound

    def unbind(self) -> None:
        self.bound = False
        self.say("released from bonds")

    def bind(self) -> None:
        self.bound = True

    def earn_points(self, points: int) -> None:
        self.score += points

    # -- spatial queries (delegated to the position) --

    def get_other_units(self) -> list[Unit]:
        return [unit for unit in self.position.floor.get_units() if unit is not self]

    def get_space(self) -> Any:
        return self.position.get_space()

    def get_space_at(self, direction: str, forward: int = 1, right: int = 0) -> Any:
        return self.position.get_relative_space(direction, (forward, right))

    def get_direction_of_stairs(self) -> str:
        return self.get_direction_of(self.position.floor.get_stairs_space())

    def get_direction_of(self, space: Any) -> str:
        return self.position.get_relative_direction_of(space)

    def get_distance_of(self, space: Any) -> int:
        return self.position.get_distance_of(space)

    # -- spatial mutation --

    def move(self, direction: str, forward: int = 1, right: int = 0) -> None:
        self.position.move(direction, (forward, right))
        self.say()

    def rotate(self, direction: str) -> None:
        self.position.rotate(direction)
        self.say()

    def vanish(self) -> None:
        """Remove the unit from the floor."""
        self.position = None
        self.say()

    # -- reporting --

    def say(self, message: str | None = None) -> None:
        try:
            self.sink.say(self, message)
        except Exception:
            logger.exception("Message sink failed for %s — message dropped", self)

    def to_json(self) -> dict[str, Any]:
        """Identity and vitals record: name, character, maxHealth, health."""
        schema = UnitSchema(
            name=self.name,
            character=self.character,
            max_health=self.max_health,
            health=self.health,
        )
        return schema.model_dump(by_alias=True)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"Unit({self.name!r}, hp={self.health}/{self.max_health}, "
            f"alive={self.is_alive()}, bound={self.bound}, score={self.score})"
        )
