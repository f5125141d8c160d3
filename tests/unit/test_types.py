from typing import Tuple

import pytest

from grid_crucible.position import Position
from grid_crucible.types import MOVE_DIRECTIONS, Direction


@pytest.mark.parametrize(
    "direction, opposite",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite_is_involution(direction: Direction, opposite: Direction) -> None:
    assert direction.opposite is opposite
    assert opposite.opposite is direction


@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_perpendiculars_exclude_axis(direction: Direction) -> None:
    turns = direction.perpendicular
    assert len(turns) == 2
    assert direction not in turns
    assert direction.opposite not in turns


def test_none_direction_has_no_moves() -> None:
    assert Direction.NONE.delta == (0, 0)
    assert Direction.NONE.perpendicular == ()
    assert Direction.NONE not in MOVE_DIRECTIONS


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (2, 1)),
        (Direction.DOWN, (2, 3)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (3, 2)),
        (Direction.NONE, (2, 2)),
    ],
)
def test_position_step(direction: Direction, expected: Tuple[int, int]) -> None:
    assert Position(2, 2).step(direction) == Position(*expected)


def test_position_step_does_not_clamp() -> None:
    assert Position(0, 0).step(Direction.LEFT) == Position(-1, 0)
