"""Board coordinates: 1-indexed (row, col) cells bounded by ``[1, grid_size]``."""

from __future__ import annotations

import random
from typing import Iterable, List, NamedTuple, Optional

import numpy as np  # type: ignore


class Position(NamedTuple):
    """A board cell. Either coordinate may be ``None`` (unset)."""

    row: Optional[int]
    col: Optional[int]

    @property
    def is_complete(self) -> bool:
        return self.row is not None and self.col is not None

    def moved(self, direction) -> "Position":
        """Return the neighbouring cell one step along ``direction``."""
        drow, dcol = direction.value
        return Position(self.row + drow, self.col + dcol)


def random_coordinate(grid_size: int, rng: random.Random) -> int:
    """Uniform integer in ``[1, grid_size]``."""
    return rng.randint(1, grid_size)


def random_position(grid_size: int, rng: random.Random) -> Position:
    row = random_coordinate(grid_size, rng)
    col = random_coordinate(grid_size, rng)
    return Position(row, col)


def is_out_of_bounds(pos: Position, grid_size: int) -> bool:
    """
    True when the cell lies off the board.

    Row/col 0 is never legal, nor is an unset coordinate; anything past
    ``grid_size`` is off the far edge.
    """
    row, col = pos
    if not row or not col:
        return True
    return not (1 <= row <= grid_size and 1 <= col <= grid_size)


def occupancy_grid(positions: Iterable[Position], grid_size: int) -> np.ndarray:
    """
    Boolean ``grid_size x grid_size`` mask, True where a position sits.

    Index ``[r - 1, c - 1]`` holds cell ``(r, c)``. Off-board positions are skipped.
    """
    mask = np.zeros((grid_size, grid_size), dtype=bool)
    for pos in positions:
        if is_out_of_bounds(pos, grid_size):
            continue
        mask[pos.row - 1, pos.col - 1] = True
    return mask


def free_positions(positions: Iterable[Position], grid_size: int) -> List[Position]:
    """Every on-board cell not covered by ``positions``, row-major order."""
    mask = occupancy_grid(positions, grid_size)
    rows, cols = np.nonzero(~mask)
    return [Position(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]
