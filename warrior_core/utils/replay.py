"""Replay serialization — records round-by-round unit state for deterministic replay."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from warrior_core.core.snapshot import RoundSnapshot

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates round snapshots and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_rounds")

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._rounds: list[dict[str, Any]] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def rounds(self) -> list[dict[str, Any]]:
        return self._rounds

    def record_round(self, snapshot: RoundSnapshot) -> None:
        self._rounds.append(
            {
                "round": snapshot.round,
                "digest": snapshot.digest(),
                "units": snapshot.records(),
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "total_rounds": len(self._rounds),
            "rounds": self._rounds,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d rounds)", self._path, len(self._rounds))
