"""
Snake and food entities, plus the occupancy queries the engine relies on.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, List, Optional

from .grid import Position, free_positions, random_position

logger = logging.getLogger(__name__)


class MissingCoordinateError(ValueError):
    """A position with an unset coordinate reached an occupancy query."""


class BoardFullError(RuntimeError):
    """The snake covers every cell; no food can be placed."""


@dataclass
class Segment:
    """One cell of the snake. ``handle`` belongs to the renderer."""

    position: Position
    handle: Any = None


@dataclass
class Food:
    position: Position
    handle: Any = None


class Snake:
    """
    Ordered segments, head at index 0 and tail at the end.

    Attributes:
        segments: list of Segment from head to tail
    """

    def __init__(self, segments: List[Segment]):
        if not segments:
            raise ValueError("A snake needs at least a head segment.")
        self.segments = segments

    @classmethod
    def from_positions(cls, positions: List[Position]) -> "Snake":
        return cls([Segment(Position(*pos)) for pos in positions])

    @property
    def head(self) -> Segment:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)

    def positions(self) -> List[Position]:
        return [seg.position for seg in self.segments]

    def shift_body(self) -> None:
        """Every body segment takes the position of the one ahead of it."""
        # Walk tail -> head so nothing is read after being overwritten.
        for i in range(len(self.segments) - 1, 0, -1):
            self.segments[i].position = self.segments[i - 1].position

    def move_head(self, direction) -> None:
        self.head.position = self.head.position.moved(direction)

    def grow(self, segment: Segment) -> None:
        self.segments.append(segment)

    def hits_itself(self) -> bool:
        head = self.head.position
        return any(seg.position == head for seg in self.segments[1:])

    def __repr__(self) -> str:
        return f"<Snake len={len(self)} head={self.head.position}>"


def is_occupied(pos: Position, snake: Snake) -> bool:
    """True iff some segment of ``snake`` sits on ``pos``."""
    if not pos.is_complete:
        raise MissingCoordinateError(f"Missing coordinate in {pos!r}")
    return any(seg.position == pos for seg in snake.segments)


def place_food(
    snake: Snake,
    grid_size: int,
    rng: random.Random,
    max_attempts: int = 1000,
) -> Position:
    """
    Pick a free cell for the next food.

    Rejection-samples random cells first. A crowded board can make that
    slow, so after ``max_attempts`` misses the choice is made among the
    exact free cells instead.

    Raises:
        BoardFullError: the snake already covers all ``grid_size ** 2`` cells.
    """
    capacity = grid_size * grid_size
    if len(snake) >= capacity:
        raise BoardFullError(f"Snake of length {len(snake)} fills a {grid_size}x{grid_size} board")

    for _ in range(max_attempts):
        pos = random_position(grid_size, rng)
        if not is_occupied(pos, snake):
            return pos

    free = free_positions(snake.positions(), grid_size)
    logger.debug(
        "Food sampling missed %d times; choosing among %d free cells",
        max_attempts, len(free),
    )
    if not free:
        raise BoardFullError("No free cell left for food")
    return rng.choice(free)


def food_at(food: Optional[Food], pos: Position) -> bool:
    return food is not None and food.position == pos
