"""RoundLoop — the two-phase round scheduler.

Phase cycle:
  1. Prepare: every living unit plays its control hook against a fresh
     Turn; senses run, one action per unit is captured.
  2. Perform: every unit that was alive when the round started ticks its
     effects and performs its captured action.
  3. Advancement: snapshot, replay recording, round counter.

No unit is performed before every unit has been prepared.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from warrior_core.core.snapshot import RoundSnapshot
from warrior_core.utils.event_log import EventLog, LoggingSink
from warrior_core.utils.replay import ReplayRecorder

if TYPE_CHECKING:
    from warrior_core.config import EngineConfig
    from warrior_core.core.unit import Unit

logger = logging.getLogger(__name__)


class RoundLoop:
    """Plays rounds over a fixed list of units in list order.

    The loop does not own the units' sinks; when given an ``EventLog`` it
    keeps the log's round counter in step so events are tagged correctly.
    """

    __slots__ = (
        "_config",
        "_units",
        "_event_log",
        "_recorder",
        "_is_finished",
        "_round",
        "_last_snapshot",
    )

    def __init__(
        self,
        config: EngineConfig,
        units: Iterable[Unit],
        event_log: EventLog | None = None,
        recorder: ReplayRecorder | None = None,
        is_finished: Callable[[list[Unit]], bool] | None = None,
    ) -> None:
        self._config = config
        self._units: list[Unit] = list(units)
        self._event_log = event_log
        self._recorder = recorder
        self._is_finished = is_finished
        self._round = 0
        self._last_snapshot: RoundSnapshot | None = None

    @classmethod
    def from_config(
        cls,
        config: EngineConfig,
        units: Iterable[Unit],
        record_replay: bool = False,
        is_finished: Callable[[list[Unit]], bool] | None = None,
    ) -> RoundLoop:
        """Build a loop whose units all report to a shared ``EventLog``.

        Units that still use their default sink are switched to the new log.
        """
        units = list(units)
        event_log = EventLog(maxlen=config.event_log_maxlen)
        for unit in units:
            if isinstance(unit.sink, LoggingSink):
                unit.sink = event_log
        recorder = ReplayRecorder(config.replay_file) if record_replay else None
        return cls(config, units, event_log=event_log, recorder=recorder, is_finished=is_finished)

    @property
    def event_log(self) -> EventLog | None:
        return self._event_log

    @property
    def round(self) -> int:
        return self._round

    @property
    def units(self) -> list[Unit]:
        return self._units

    @property
    def last_snapshot(self) -> RoundSnapshot | None:
        """Snapshot taken at the end of the most recent round."""
        return self._last_snapshot

    def living_units(self) -> list[Unit]:
        return [u for u in self._units if u.is_alive()]

    def create_snapshot(self) -> RoundSnapshot:
        """Create an immutable snapshot of every unit."""
        return RoundSnapshot.from_units(self._round, self._units)

    def should_stop(self) -> bool:
        if not self.living_units():
            logger.info("Round %d: No units alive — play ended.", self._round)
            return True
        if self._round >= self._config.max_rounds:
            logger.info("Round %d: Max rounds reached.", self._round)
            return True
        if self._is_finished is not None and self._is_finished(self._units):
            logger.info("Round %d: Finish condition met.", self._round)
            return True
        return False

    def tick_once(self) -> bool:
        """Play a single round. Returns False if play should stop."""
        if self.should_stop():
            return False
        self.play_round()
        return True

    def run(self) -> None:
        """Play rounds until a stop condition holds."""
        logger.info("=== Play started (%d units) ===", len(self._units))

        while self.tick_once():
            if self._round % 50 == 0:
                logger.info("Round %d: %d units alive", self._round, len(self.living_units()))

        logger.info("=== Play finished at round %d ===", self._round)
        if self._recorder:
            self._recorder.flush()

    def play_round(self) -> RoundSnapshot:
        """Execute one complete round and return the end-of-round snapshot."""
        self._round += 1
        if self._event_log is not None:
            self._event_log.round = self._round

        # --- Phase 1: Prepare ---
        acting = self.living_units()
        for unit in acting:
            self._prepare(unit)

        # --- Phase 2: Perform ---
        for unit in acting:
            unit.perform_turn()

        # --- Phase 3: Advancement ---
        snapshot = self.create_snapshot()
        self._last_snapshot = snapshot
        if self._recorder:
            self._recorder.record_round(snapshot)
        logger.debug("Round %d done (digest=%s)", self._round, snapshot.digest())
        return snapshot

    def _prepare(self, unit: Unit) -> None:
        if not self._config.skip_failed_controllers:
            unit.prepare_turn()
            return
        try:
            unit.prepare_turn()
        except Exception:
            logger.exception("Control hook failed for %s — skipping turn", unit)
            unit.turn = None
