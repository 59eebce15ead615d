"""Message sinks — where units report what happens to them.

Units call ``sink.say(unit, message)`` for narrative messages ("takes 3
damage, 17 health power left") and ``sink.say(unit)`` with no message for
positionless status updates after a move, rotation or vanish.

Two sinks are provided:
  - ``LoggingSink`` forwards to the standard ``logging`` module.
  - ``EventLog`` keeps ``UnitEvent`` records for later inspection, tagged
    with the round the scheduler is currently playing.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from warrior_core.utils.logging import UNIT_LOGGER

if TYPE_CHECKING:
    from warrior_core.core.unit import Unit

logger = logging.getLogger(__name__)


class MessageSink(Protocol):
    """Fire-and-forget receiver of unit messages."""

    def say(self, unit: Unit, message: str | None = None) -> None: ...


class LoggingSink:
    """Routes unit messages to a ``logging.Logger``."""

    __slots__ = ("_logger",)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logging.getLogger(UNIT_LOGGER)

    def say(self, unit: Unit, message: str | None = None) -> None:
        if message is None:
            self._logger.debug("%s updated: %s", unit, unit.to_json())
        else:
            self._logger.info("%s %s", unit, message)


@dataclass(frozen=True, slots=True)
class UnitEvent:
    """A single message emitted by a unit."""

    round: int
    unit: dict[str, Any]          # to_json() record at the time of the message
    message: str | None = None    # None = status update without narrative

    @property
    def unit_name(self) -> str:
        return self.unit["name"]

    def __str__(self) -> str:
        if self.message is None:
            return f"[{self.round}] {self.unit_name}"
        return f"[{self.round}] {self.unit_name} {self.message}"


class EventLog:
    """Event log sink. Writers append; readers get copies.

    All events are kept until ``clear()`` unless *maxlen* bounds the buffer.
    Thread-safe via a simple lock.
    """

    __slots__ = ("_buffer", "_lock", "round")

    def __init__(self, maxlen: int | None = None) -> None:
        self._buffer: deque[UnitEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self.round: int = 0

    def say(self, unit: Unit, message: str | None = None) -> None:
        self.append(UnitEvent(round=self.round, unit=unit.to_json(), message=message))

    def append(self, event: UnitEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_round(self, round_: int) -> list[UnitEvent]:
        """Return all events with round >= *round_*."""
        with self._lock:
            return [e for e in self._buffer if e.round >= round_]

    def messages(self, unit_name: str | None = None) -> list[str]:
        """Narrative messages in order, optionally for a single unit."""
        with self._lock:
            return [
                e.message for e in self._buffer
                if e.message is not None and (unit_name is None or e.unit_name == unit_name)
            ]

    def latest(self, count: int = 50) -> list[UnitEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
