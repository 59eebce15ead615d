"""Engine configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for a run of rounds."""

    # Timing
    max_rounds: int = 1000

    # Control hooks
    skip_failed_controllers: bool = False  # True = log and drop the unit's turn instead of aborting

    # Event log
    event_log_maxlen: int | None = None    # None = keep every event until cleared

    # Replay
    replay_file: str = "replay.json"
