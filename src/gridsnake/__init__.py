"""Snake on a square grid: tick engine, input state machine and session controller."""

from .direction import Direction, DirectionState
from .entities import BoardFullError, Food, MissingCoordinateError, Segment, Snake
from .game import GameState, TickEvent, TickOutcome, new_game_state, step_game
from .grid import Position
from .session import GameSession, Lifecycle, ScoreUpdate

__all__ = [
    "Direction", "DirectionState",
    "BoardFullError", "Food", "MissingCoordinateError", "Segment", "Snake",
    "GameState", "TickEvent", "TickOutcome", "new_game_state", "step_game",
    "Position",
    "GameSession", "Lifecycle", "ScoreUpdate",
]
