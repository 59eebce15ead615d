"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

UNIT_LOGGER = "warrior_core.units"


def setup_logging(
    level: str = "INFO",
    unit_messages: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure root logger with a clean format for round-by-round output.

    Unit narrative ("Sludge takes 3 damage, 9 health power left") goes
    through the ``warrior_core.units`` logger; pass ``unit_messages=False``
    to silence it while keeping engine logs.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger(UNIT_LOGGER).setLevel(logging.NOTSET if unit_messages else logging.WARNING)
