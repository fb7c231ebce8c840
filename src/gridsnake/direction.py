# direction.py
from __future__ import annotations
from enum import Enum
import logging
from typing import Optional

logger = logging.getLogger(__name__)


# ----- Directions (drow, dcol) -----
class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Arrow names from the web UI plus the names pygame.key.name() reports.
INPUT_MAP = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

PAUSE_KEYS = {" ", "space"}


def direction_from_input(key: Optional[str]) -> Optional[Direction]:
    """Map an input key to a direction; unknown keys give None."""
    if key is None:
        return None
    return INPUT_MAP.get(key)


def is_pause_input(key: Optional[str]) -> bool:
    return key in PAUSE_KEYS


def is_opposite_of(a: Direction, b: Direction) -> bool:
    return a.opposite is b


class DirectionState:
    """
    Committed vs pending direction.

    ``pending`` is what the next tick moves the head by; it only becomes
    ``current`` once the tick has moved. Reversal is judged against
    ``current``, so two quick key presses within one tick can never turn
    the head back through the body.
    """

    def __init__(self) -> None:
        self.current: Optional[Direction] = None
        self.pending: Optional[Direction] = None

    @property
    def is_idle(self) -> bool:
        return self.pending is None

    def request(self, new: Direction) -> bool:
        """Buffer ``new`` for the next tick. Returns False when rejected as a reversal."""
        if self.current is not None and is_opposite_of(new, self.current):
            logger.debug("Rejected reversal %s while moving %s", new.name, self.current.name)
            return False
        self.pending = new
        return True

    def commit(self) -> None:
        self.current = self.pending

    def __repr__(self) -> str:
        cur = self.current.name if self.current else None
        pen = self.pending.name if self.pending else None
        return f"<DirectionState current={cur} pending={pen}>"
