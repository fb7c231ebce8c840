import random

import pytest

from gridsnake.direction import Direction
from gridsnake.entities import (
    BoardFullError,
    MissingCoordinateError,
    Segment,
    Snake,
    is_occupied,
    place_food,
)
from gridsnake.grid import Position


def test_snake_needs_a_head():
    with pytest.raises(ValueError):
        Snake([])


def test_is_occupied_matches_any_segment():
    snake = Snake.from_positions([(2, 2), (2, 1), (1, 1)])
    assert is_occupied(Position(2, 2), snake)
    assert is_occupied(Position(1, 1), snake)
    assert not is_occupied(Position(3, 3), snake)


@pytest.mark.parametrize("pos", [Position(None, 1), Position(1, None), Position(None, None)])
def test_is_occupied_rejects_missing_coordinate(pos):
    snake = Snake.from_positions([(1, 1)])
    with pytest.raises(MissingCoordinateError):
        is_occupied(pos, snake)


def test_shift_body_follows_head_one_step_behind():
    snake = Snake.from_positions([(2, 2), (2, 1), (1, 1)])
    snake.shift_body()
    snake.move_head(Direction.DOWN)
    assert snake.positions() == [Position(3, 2), Position(2, 2), Position(2, 1)]


def test_grow_appends_at_tail():
    snake = Snake.from_positions([(2, 2), (2, 1)])
    snake.grow(Segment(Position(3, 3), handle="marker"))
    assert len(snake) == 3
    assert snake.segments[-1].handle == "marker"


def test_hits_itself_ignores_head():
    snake = Snake.from_positions([(2, 2)])
    assert not snake.hits_itself()
    snake = Snake.from_positions([(2, 2), (2, 3), (2, 2)])
    assert snake.hits_itself()


def test_food_never_placed_on_snake():
    rng = random.Random(7)
    snake = Snake.from_positions([(r, c) for r in range(1, 5) for c in range(1, 5) if (r, c) != (4, 4)][:12])
    for _ in range(100):
        pos = place_food(snake, 4, rng)
        assert not is_occupied(pos, snake)


def test_food_placement_falls_back_to_free_cells():
    rng = random.Random(3)
    cells = [(r, c) for r in range(1, 4) for c in range(1, 4)]
    snake = Snake.from_positions([cell for cell in cells if cell != (2, 2)])
    # One attempt will almost always miss; the free-cell fallback must still find (2, 2).
    for _ in range(20):
        assert place_food(snake, 3, rng, max_attempts=1) == Position(2, 2)


def test_full_board_raises():
    rng = random.Random(0)
    snake = Snake.from_positions([(1, 1), (1, 2), (2, 2), (2, 1)])
    with pytest.raises(BoardFullError):
        place_food(snake, 2, rng)
