import pytest

from gridsnake.direction import (
    Direction,
    DirectionState,
    direction_from_input,
    is_opposite_of,
    is_pause_input,
)


@pytest.mark.parametrize(
    "key,expected",
    [
        ("ArrowUp", Direction.UP),
        ("ArrowDown", Direction.DOWN),
        ("ArrowLeft", Direction.LEFT),
        ("ArrowRight", Direction.RIGHT),
        ("up", Direction.UP),
        ("right", Direction.RIGHT),
    ],
)
def test_arrow_inputs_map_to_directions(key, expected):
    assert direction_from_input(key) is expected


@pytest.mark.parametrize("key", ["a", "Enter", " ", "space", "", None])
def test_other_inputs_are_ignored(key):
    assert direction_from_input(key) is None


def test_pause_input():
    assert is_pause_input(" ")
    assert is_pause_input("space")
    assert not is_pause_input("up")
    assert not is_pause_input(None)


def test_opposites_are_symmetric_pairs():
    for d in Direction:
        matches = [o for o in Direction if is_opposite_of(d, o)]
        assert len(matches) == 1
        assert is_opposite_of(matches[0], d)
    assert is_opposite_of(Direction.UP, Direction.DOWN)
    assert is_opposite_of(Direction.LEFT, Direction.RIGHT)
    assert not is_opposite_of(Direction.UP, Direction.LEFT)


def test_first_request_leaves_idle():
    ds = DirectionState()
    assert ds.is_idle
    assert ds.request(Direction.DOWN)
    assert not ds.is_idle
    assert ds.pending is Direction.DOWN
    assert ds.current is None


def test_any_direction_accepted_before_first_commit():
    ds = DirectionState()
    ds.request(Direction.LEFT)
    assert ds.request(Direction.RIGHT)
    assert ds.pending is Direction.RIGHT


def test_reversal_of_committed_direction_rejected():
    for d in Direction:
        ds = DirectionState()
        ds.request(d)
        ds.commit()
        assert not ds.request(d.opposite)
        assert ds.current is d
        assert ds.pending is d


def test_pending_becomes_current_only_on_commit():
    ds = DirectionState()
    ds.request(Direction.RIGHT)
    ds.commit()
    assert ds.request(Direction.UP)
    assert ds.current is Direction.RIGHT
    ds.commit()
    assert ds.current is Direction.UP


def test_two_quick_turns_cannot_reverse_through_body():
    ds = DirectionState()
    ds.request(Direction.RIGHT)
    ds.commit()
    # Up then Left within one tick: Left is judged against the committed Right.
    assert ds.request(Direction.UP)
    assert not ds.request(Direction.LEFT)
    assert ds.pending is Direction.UP
