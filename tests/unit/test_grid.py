from typing import Tuple

import pytest

from shadow_blocks.components import Position
from shadow_blocks.types import Direction
from shadow_blocks.utils.grid import (
    clamp_position,
    next_position,
    offset,
    sign,
)
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (1, 0)),
        (Direction.DOWN, (1, 2)),
        (Direction.LEFT, (0, 1)),
        (Direction.RIGHT, (2, 1)),
    ],
)
def test_next_position_steps_one_tile(
    direction: Direction, expected: Tuple[int, int]
) -> None:
    state = make_state(["...", "...", "..."])
    assert next_position(state, Position(1, 1), direction) == Position(*expected)


@pytest.mark.parametrize("direction", list(Direction))
def test_step_and_back_returns_to_start(direction: Direction) -> None:
    state = make_state(["...", "...", "..."])
    start = Position(1, 1)
    there = next_position(state, start, direction)
    assert next_position(state, there, direction.opposite) == start


@pytest.mark.parametrize(
    "start, direction",
    [
        ((0, 0), Direction.LEFT),
        ((0, 0), Direction.UP),
        ((2, 2), Direction.RIGHT),
        ((2, 2), Direction.DOWN),
    ],
)
def test_next_position_clamped_at_map_edge(
    start: Tuple[int, int], direction: Direction
) -> None:
    state = make_state(["...", "...", "..."])
    assert next_position(state, Position(*start), direction) == Position(*start)


def test_clamp_position_ignores_each_axis_independently() -> None:
    current = Position(2, 2)
    assert clamp_position(current, -1, 1, 3, 3) == Position(2, 1)
    assert clamp_position(current, 0, 3, 3, 3) == Position(0, 2)
    assert clamp_position(current, 5, 5, 3, 3) == current


def test_offset_and_sign() -> None:
    assert offset(Position(1, 1), Position(3, 0)) == (2, -1)
    assert sign(-4) == -1
    assert sign(4) == 1
    assert sign(0) == 1


def test_positions_compare_structurally() -> None:
    assert Position(1, 2) == Position(1, 2)
    assert Position(1, 2) != Position(2, 1)
