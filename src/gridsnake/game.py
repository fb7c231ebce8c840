# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import random
from typing import Optional

from .direction import DirectionState
from .entities import BoardFullError, Food, Segment, Snake, food_at, place_food
from .grid import is_out_of_bounds, random_position

logger = logging.getLogger(__name__)


class TickEvent(Enum):
    IDLE = "idle"              # no direction yet, nothing moved
    MOVED = "moved"
    ATE = "ate"
    GAME_OVER = "game_over"
    BOARD_FULL = "board_full"  # ate the last reachable food; nothing left to place

    @property
    def is_terminal(self) -> bool:
        return self in (TickEvent.GAME_OVER, TickEvent.BOARD_FULL)


@dataclass
class TickOutcome:
    event: TickEvent
    reason: Optional[str] = None      # 'wall' or 'self' on GAME_OVER
    consumed: Optional[Food] = None   # the food marker absorbed into the snake

    @property
    def ate(self) -> bool:
        return self.consumed is not None


# ---------- State ----------
@dataclass
class GameState:
    grid_size: int
    snake: Snake                   # head at index 0
    food: Optional[Food]           # None once the board is full
    directions: DirectionState = field(default_factory=DirectionState)
    score: int = 0


def new_game_state(grid_size: int, rng: random.Random, max_food_attempts: int = 1000) -> GameState:
    """One-segment snake at a random cell, food somewhere else."""
    snake = Snake([Segment(random_position(grid_size, rng))])
    food = Food(place_food(snake, grid_size, rng, max_food_attempts))
    return GameState(grid_size=grid_size, snake=snake, food=food)


# ---------- Update ----------
def step_game(state: GameState, rng: random.Random, max_food_attempts: int = 1000) -> TickOutcome:
    """
    Advance the game by one tick.

    Order matters: body shift, head move, then bounds, self-collision and
    food in that order, so a fatal move never scores.
    """
    directions = state.directions
    if directions.is_idle:
        return TickOutcome(TickEvent.IDLE)

    snake = state.snake
    if len(snake) > 1:
        snake.shift_body()

    snake.move_head(directions.pending)
    directions.commit()
    head = snake.head.position

    if is_out_of_bounds(head, state.grid_size):
        logger.info("Head left the board at %s", head)
        return TickOutcome(TickEvent.GAME_OVER, reason="wall")

    if snake.hits_itself():
        logger.info("Head ran into the body at %s", head)
        return TickOutcome(TickEvent.GAME_OVER, reason="self")

    if not food_at(state.food, head):
        return TickOutcome(TickEvent.MOVED)

    # The food marker becomes the new tail, keeping its renderer handle.
    eaten = state.food
    snake.grow(Segment(eaten.position, eaten.handle))
    try:
        state.food = Food(place_food(snake, state.grid_size, rng, max_food_attempts))
    except BoardFullError:
        logger.info("Board full at length %d", len(snake))
        state.food = None
        return TickOutcome(TickEvent.BOARD_FULL, consumed=eaten)
    return TickOutcome(TickEvent.ATE, consumed=eaten)
