"""
Session controller: lifecycle, score and the periodic tick.

The session is the only place that ends a game. The engine reports what
happened on a tick; the session turns that into score changes, renderer
calls and lifecycle transitions.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import Config
from .direction import direction_from_input, is_pause_input
from .entities import MissingCoordinateError
from .game import GameState, TickEvent, TickOutcome, new_game_state, step_game
from .render import Renderer
from .scheduler import Scheduler
from .storage import HighScoreStore

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game Over"
BOARD_FULL_MESSAGE = "Board full - you win!"


class Lifecycle(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(frozen=True)
class ScoreUpdate:
    score: int
    high_score: int
    new_high: bool = False


class GameSession:
    """
    One game from first key press to game over.

    Attributes:
        state: the GameState being played
        lifecycle: NOT_STARTED, RUNNING, PAUSED or OVER
        high_score: best score seen, mirrored to the store on every change
    """

    def __init__(
        self,
        config: Config,
        scheduler: Scheduler,
        store: HighScoreStore,
        renderer: Renderer,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.scheduler = scheduler
        self.store = store
        self.renderer = renderer
        self.rng = rng if rng is not None else random.Random(config.seed)

        self.state: GameState
        self.lifecycle = Lifecycle.NOT_STARTED
        self.high_score = 0
        self._timer = None
        self.reset()

    # ---------- Lifecycle ----------
    def reset(self) -> None:
        """Throw the current game away and set up a fresh one."""
        self._cancel_timer()
        self.high_score = self.store.get_high_score() or 0
        self.state = new_game_state(self.config.grid_size, self.rng, self.config.max_food_attempts)
        self.lifecycle = Lifecycle.NOT_STARTED

        self.renderer.clear()
        self.state.snake.head.handle = self.renderer.create("head")
        self.state.food.handle = self.renderer.create("food")
        self.renderer.show_score(self.state.score, self.high_score)
        self.redraw()
        logger.info(
            "New game on %dx%d board, head at %s, food at %s",
            self.config.grid_size, self.config.grid_size,
            self.state.snake.head.position, self.state.food.position,
        )

    def start_session(self) -> None:
        if self.lifecycle is not Lifecycle.NOT_STARTED:
            return
        if self.state.directions.is_idle:
            return
        self.lifecycle = Lifecycle.RUNNING
        self._timer = self.scheduler.schedule(self.tick, self.config.tick_ms)
        logger.info("Game started, ticking every %d ms", self.config.tick_ms)

    def toggle_pause(self) -> None:
        if self.lifecycle is Lifecycle.RUNNING:
            self.lifecycle = Lifecycle.PAUSED
        elif self.lifecycle is Lifecycle.PAUSED:
            self.lifecycle = Lifecycle.RUNNING
        else:
            return
        logger.info("Game %s", self.lifecycle.value)

    def end_session(self, message: str = GAME_OVER_MESSAGE) -> None:
        if self.lifecycle not in (Lifecycle.RUNNING, Lifecycle.PAUSED):
            return
        self.lifecycle = Lifecycle.OVER
        self._cancel_timer()
        self.renderer.notify(message)
        logger.info("%s: score %d, high score %d", message, self.state.score, self.high_score)

    def close(self) -> None:
        """Stop ticking without ending the game (window closed)."""
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self.scheduler.cancel(self._timer)
            self._timer = None

    # ---------- Score ----------
    def record_score(self, points: int = 1) -> ScoreUpdate:
        self.state.score += points
        new_high = self.state.score > self.high_score
        if new_high:
            self.high_score = self.state.score
            self.store.set_high_score(self.high_score)
        self.renderer.show_score(self.state.score, self.high_score)
        return ScoreUpdate(self.state.score, self.high_score, new_high)

    # ---------- Input ----------
    def handle_input(self, key: Optional[str]) -> None:
        if is_pause_input(key):
            self.handle_pause_input()
        else:
            self.handle_direction_input(key)

    def handle_direction_input(self, key: Optional[str]) -> bool:
        """Returns True when the key was accepted as the next direction."""
        if self.lifecycle is Lifecycle.OVER:
            return False
        direction = direction_from_input(key)
        if direction is None:
            return False
        accepted = self.state.directions.request(direction)
        if accepted and self.lifecycle is Lifecycle.NOT_STARTED:
            self.start_session()
        return accepted

    def handle_pause_input(self) -> None:
        self.toggle_pause()

    # ---------- Tick ----------
    def tick(self) -> Optional[TickOutcome]:
        """Scheduler callback. Does nothing unless the game is running."""
        if self.lifecycle is not Lifecycle.RUNNING:
            return None
        try:
            outcome = step_game(self.state, self.rng, self.config.max_food_attempts)
        except MissingCoordinateError:
            logger.exception("Tick aborted")
            return None

        if outcome.event is TickEvent.GAME_OVER:
            self.end_session(GAME_OVER_MESSAGE)
            return outcome

        if outcome.ate:
            self.record_score()
            self.renderer.restyle(outcome.consumed.handle, "body")
            if self.state.food is not None:
                self.state.food.handle = self.renderer.create("food")

        self.redraw()
        if outcome.event is TickEvent.BOARD_FULL:
            self.end_session(BOARD_FULL_MESSAGE)
        return outcome

    def redraw(self) -> None:
        items = [(seg.handle, seg.position.row, seg.position.col) for seg in self.state.snake.segments]
        food = self.state.food
        if food is not None:
            items.append((food.handle, food.position.row, food.position.col))
        self.renderer.place(items)

    @property
    def score(self) -> int:
        return self.state.score

    def __repr__(self) -> str:
        return (
            f"<GameSession {self.lifecycle.value} score={self.state.score} "
            f"high={self.high_score} snake={len(self.state.snake)}>"
        )
