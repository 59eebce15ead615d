"""Engine layer: the two-phase round loop."""

from warrior_core.engine.round_loop import RoundLoop

__all__ = ["RoundLoop"]
