"""Minimal grid floor for exercising units in tests.

Provides the position contract units delegate to: relative spaces,
directions and distances, movement, rotation, and floor-wide queries.

Usage:
    floor = Floor(8, 1, stairs=(7, 0))
    floor.place(warrior, 0, 0, facing="east")
    assert warrior.get_direction_of_stairs() == "forward"
"""

from __future__ import annotations

import sys
import os
from dataclasses import dataclass

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from warrior_core.core.unit import Unit

ABSOLUTE_DIRECTIONS = ("north", "east", "south", "west")
RELATIVE_DIRECTIONS = ("forward", "right", "backward", "left")

_OFFSETS = {
    "north": (0, -1),
    "east": (1, 0),
    "south": (0, 1),
    "west": (-1, 0),
}


@dataclass(frozen=True)
class Space:
    floor: Floor
    x: int
    y: int

    @property
    def location(self) -> tuple[int, int]:
        return (self.x, self.y)

    def get_unit(self) -> Unit | None:
        for unit in self.floor.get_units():
            if unit.position.location == self.location:
                return unit
        return None

    def is_stairs(self) -> bool:
        return self.location == self.floor.stairs

    def is_empty(self) -> bool:
        return self.floor.in_bounds(self.x, self.y) and self.get_unit() is None


class Position:
    """Location and facing of one unit on a floor."""

    def __init__(self, floor: Floor, x: int, y: int, facing: str = "east") -> None:
        self.floor = floor
        self.x = x
        self.y = y
        self.facing = facing

    @property
    def location(self) -> tuple[int, int]:
        return (self.x, self.y)

    def _absolute(self, direction: str) -> str:
        offset = RELATIVE_DIRECTIONS.index(direction)
        return ABSOLUTE_DIRECTIONS[(ABSOLUTE_DIRECTIONS.index(self.facing) + offset) % 4]

    def _translate(self, direction: str, forward: int, right: int) -> tuple[int, int]:
        ahead = self._absolute(direction)
        side = ABSOLUTE_DIRECTIONS[(ABSOLUTE_DIRECTIONS.index(ahead) + 1) % 4]
        fx, fy = _OFFSETS[ahead]
        sx, sy = _OFFSETS[side]
        return (self.x + fx * forward + sx * right, self.y + fy * forward + sy * right)

    def get_space(self) -> Space:
        return Space(self.floor, self.x, self.y)

    def get_relative_space(self, direction: str, offset: tuple[int, int]) -> Space:
        x, y = self._translate(direction, *offset)
        return Space(self.floor, x, y)

    def get_relative_direction_of(self, space: Space) -> str:
        dx, dy = space.x - self.x, space.y - self.y
        if abs(dx) > abs(dy):
            absolute = "east" if dx > 0 else "west"
        else:
            absolute = "south" if dy > 0 else "north"
        offset = ABSOLUTE_DIRECTIONS.index(absolute) - ABSOLUTE_DIRECTIONS.index(self.facing)
        return RELATIVE_DIRECTIONS[offset % 4]

    def get_distance_of(self, space: Space) -> int:
        return abs(space.x - self.x) + abs(space.y - self.y)

    def move(self, direction: str, offset: tuple[int, int]) -> None:
        self.x, self.y = self._translate(direction, *offset)

    def rotate(self, direction: str) -> None:
        self.facing = self._absolute(direction)


class Floor:
    """Rectangular floor holding units and a stairs location."""

    def __init__(self, width: int, height: int, stairs: tuple[int, int] = (0, 0)) -> None:
        self.width = width
        self.height = height
        self.stairs = stairs
        self._units: list[Unit] = []

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def place(self, unit: Unit, x: int, y: int, facing: str = "east") -> Unit:
        unit.position = Position(self, x, y, facing)
        if unit not in self._units:
            self._units.append(unit)
        return unit

    def get_units(self) -> list[Unit]:
        return [u for u in self._units if u.is_alive()]

    def get_stairs_space(self) -> Space:
        return Space(self, *self.stairs)

    def get_space(self, x: int, y: int) -> Space:
        return Space(self, x, y)
