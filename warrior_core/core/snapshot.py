"""Immutable per-round snapshot of every unit, with a state digest."""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping

import xxhash

if TYPE_CHECKING:
    from warrior_core.core.unit import Unit


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    """Read-only view of the units at the end of a round.

    ``units`` holds each unit's ``to_json()`` record in scheduling order;
    ``alive`` and ``scores`` are parallel tuples.
    """

    round: int
    units: tuple[Mapping[str, Any], ...]
    alive: tuple[bool, ...]
    scores: tuple[int, ...]

    @classmethod
    def from_units(cls, round_: int, units: Iterable[Unit]) -> RoundSnapshot:
        units = list(units)
        return cls(
            round=round_,
            units=tuple(MappingProxyType(u.to_json()) for u in units),
            alive=tuple(u.is_alive() for u in units),
            scores=tuple(u.score for u in units),
        )

    @property
    def alive_count(self) -> int:
        return sum(self.alive)

    def records(self) -> list[dict[str, Any]]:
        """Plain-dict copy of every unit record, including alive and score."""
        return [
            {**record, "alive": alive, "score": score}
            for record, alive, score in zip(self.units, self.alive, self.scores)
        ]

    def digest(self) -> str:
        """Hash the observable state into a short hex digest.

        Identical unit states always produce the same digest, so two runs
        with the same inputs can be compared round by round.
        """
        payload = json.dumps(
            {"round": self.round, "units": self.records()},
            sort_keys=True,
            separators=(",", ":"),
        )
        return xxhash.xxh64(payload.encode("utf-8")).hexdigest()
